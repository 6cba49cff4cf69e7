"""イベント通知の契約。"""

from __future__ import annotations

from typing import Protocol


class EventNotifierPort(Protocol):
    """名前付きイベントをリスナーへ配信する抽象ポート。"""

    def dispatch(self, event_name: str) -> None:
        """イベントを配信する。"""
