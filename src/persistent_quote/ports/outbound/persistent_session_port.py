"""永続セッションレコードの契約。"""

from __future__ import annotations

from typing import Protocol


class PersistentSessionPort(Protocol):
    """長期 cookie に紐づく永続セッションの抽象ポート。"""

    def is_persistent(self) -> bool:
        """永続セッションが有効かを返す。"""
