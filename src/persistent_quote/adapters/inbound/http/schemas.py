"""HTTP API の入出力スキーマ。"""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """ヘルスチェックレスポンス。"""

    status: str = "ok"


class QuoteResponse(BaseModel):
    """セッションが保持する quote。"""

    quote_id: str
    is_persistent: bool
    customer_is_guest: bool


class SessionSnapshotResponse(BaseModel):
    """失効チェック後のセッション状態。"""

    logged_in: bool
    customer_id: str | None
    customer_group_id: str | None
    persistent_session: bool
    quote: QuoteResponse | None
    expire_count: int = Field(ge=0)
    dispatched_events: list[str]
