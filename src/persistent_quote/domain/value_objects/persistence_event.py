"""リクエストライフサイクルイベントを表す値オブジェクト。"""

from __future__ import annotations

from dataclasses import dataclass

PERSISTENT_SESSION_EXPIRED_EVENT = "persistent_session_expired"
DEFAULT_AREA = "frontend"


@dataclass(frozen=True, slots=True)
class PersistenceEvent:
    """チェッカーに渡される不透明なイベント文脈。"""

    name: str
    area: str = DEFAULT_AREA

    def __post_init__(self) -> None:
        """最低限の整合性を検証する。"""
        if not self.name:
            raise ValueError("name は空にできません。")
        if not self.area:
            raise ValueError("area は空にできません。")
