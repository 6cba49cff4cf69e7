"""受信 HTTP リクエストの読み取り契約。"""

from __future__ import annotations

from typing import Protocol


class RequestSourcePort(Protocol):
    """リクエスト URI とヘッダーを返す抽象ポート。"""

    def get_request_uri(self) -> str:
        """リクエスト URI を返す。"""

    def get_header(self, name: str) -> str | None:
        """ヘッダー値を返す。存在しなければ None。"""
