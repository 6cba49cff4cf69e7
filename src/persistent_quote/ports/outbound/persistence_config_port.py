"""永続カート機能の設定と失効操作の契約。"""

from __future__ import annotations

from typing import Protocol

from persistent_quote.domain.value_objects.persistence_event import PersistenceEvent


class PersistenceConfigPort(Protocol):
    """永続カート機能の有効状態を返し、失効を実行する抽象ポート。"""

    def can_process(self, event: PersistenceEvent) -> bool:
        """このイベントを処理対象にしてよいかを返す。"""

    def is_enabled(self) -> bool:
        """永続カート機能が有効かを返す。"""

    def is_shopping_cart_persist(self) -> bool:
        """カート内容の永続化が有効かを返す。"""

    def expire(self) -> None:
        """永続 quote を通常の quote へ戻す。"""
