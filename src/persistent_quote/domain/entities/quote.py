"""ショッピングカート（quote）エンティティ。"""

from __future__ import annotations

from dataclasses import dataclass

QuoteId = str


@dataclass(frozen=True, slots=True)
class Quote:
    """チェックアウトセッションが所有するカートの読み取り専用ビュー。"""

    quote_id: QuoteId
    is_persistent: bool = False
    customer_is_guest: bool = False

    def __post_init__(self) -> None:
        """最低限の整合性を検証する。"""
        if not self.quote_id:
            raise ValueError("quote_id は空にできません。")


def has_quote_id(quote_id: QuoteId | None) -> bool:
    """quote_id が None でも空文字でもないかを返す。"""
    return quote_id is not None and quote_id != ""
