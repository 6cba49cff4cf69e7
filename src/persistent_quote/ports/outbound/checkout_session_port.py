"""チェックアウトセッションの契約。"""

from __future__ import annotations

from typing import Protocol

from persistent_quote.domain.entities.quote import Quote, QuoteId


class CheckoutSessionPort(Protocol):
    """現在の quote を保持する抽象ポート。"""

    def get_quote_id(self) -> QuoteId | None:
        """現在の quote_id を返す。アクティブなカートがなければ None。"""

    def get_quote(self) -> Quote:
        """現在の quote を返す。"""

    def clear_quote(self) -> None:
        """現在の quote をセッションから外す。"""
