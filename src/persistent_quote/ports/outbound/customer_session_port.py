"""顧客セッションの契約。"""

from __future__ import annotations

from typing import Protocol, Self


class CustomerSessionPort(Protocol):
    """ログイン状態と顧客識別子を扱う抽象ポート。"""

    def is_logged_in(self) -> bool:
        """顧客がログイン済みかを返す。"""

    def set_customer_id(self, customer_id: str | None) -> Self:
        """顧客 ID を設定して自身を返す。"""

    def set_customer_group_id(self, customer_group_id: str | None) -> Self:
        """顧客グループ ID を設定して自身を返す。"""
