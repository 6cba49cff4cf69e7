"""永続セッション失効チェック向けの in-memory アダプタ群。"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import replace
from typing import Self

from persistent_quote.domain.entities.quote import Quote, QuoteId
from persistent_quote.domain.value_objects.persistence_event import (
    DEFAULT_AREA,
    PersistenceEvent,
)
from persistent_quote.ports.outbound.checkout_session_port import CheckoutSessionPort
from persistent_quote.ports.outbound.customer_session_port import CustomerSessionPort
from persistent_quote.ports.outbound.event_notifier_port import EventNotifierPort
from persistent_quote.ports.outbound.persistence_config_port import PersistenceConfigPort
from persistent_quote.ports.outbound.persistent_session_port import PersistentSessionPort
from persistent_quote.ports.outbound.request_source_port import RequestSourcePort

EventListener = Callable[[str], None]


class QuoteNotFoundError(LookupError):
    """アクティブな quote が存在しない場合の例外。"""


class InMemoryCheckoutSessionAdapter(CheckoutSessionPort):
    """quote を 1 件だけ保持するチェックアウトセッション。"""

    def __init__(self, quote: Quote | None = None) -> None:
        """初期 quote を受け取る。"""
        self._quote = quote
        self.get_quote_call_count = 0
        self.clear_quote_call_count = 0

    @property
    def quote(self) -> Quote | None:
        """現在保持している quote を返す。"""
        return self._quote

    def get_quote_id(self) -> QuoteId | None:
        """保持中 quote の ID を返す。"""
        if self._quote is None:
            return None
        return self._quote.quote_id

    def get_quote(self) -> Quote:
        """保持中 quote を返す。"""
        self.get_quote_call_count += 1
        if self._quote is None:
            raise QuoteNotFoundError("アクティブな quote がありません。")
        return self._quote

    def clear_quote(self) -> None:
        """保持中 quote を破棄する。"""
        self.clear_quote_call_count += 1
        self._quote = None

    def mark_quote_expired(self) -> None:
        """保持中 quote を非永続の通常 quote へ置き換える。"""
        if self._quote is not None:
            self._quote = replace(self._quote, is_persistent=False)


class InMemoryPersistenceConfigAdapter(PersistenceConfigPort):
    """固定設定値で動く永続カート設定。"""

    def __init__(
        self,
        checkout_session: InMemoryCheckoutSessionAdapter,
        *,
        enabled: bool = True,
        shopping_cart_persist: bool = True,
        processable_areas: Iterable[str] = (DEFAULT_AREA,),
    ) -> None:
        """失効対象のセッションと設定値を受け取る。"""
        self._checkout_session = checkout_session
        self._enabled = enabled
        self._shopping_cart_persist = shopping_cart_persist
        self._processable_areas = frozenset(processable_areas)
        self.expire_call_count = 0

    def can_process(self, event: PersistenceEvent) -> bool:
        """イベントの area が処理対象かを返す。"""
        return event.area in self._processable_areas

    def is_enabled(self) -> bool:
        return self._enabled

    def is_shopping_cart_persist(self) -> bool:
        return self._shopping_cart_persist

    def expire(self) -> None:
        """quote の永続フラグを落とす。"""
        self.expire_call_count += 1
        self._checkout_session.mark_quote_expired()


class InMemoryCustomerSessionAdapter(CustomerSessionPort):
    """ログイン状態と顧客識別子を保持する顧客セッション。"""

    def __init__(
        self,
        *,
        logged_in: bool = False,
        customer_id: str | None = None,
        customer_group_id: str | None = None,
    ) -> None:
        """初期ログイン状態と顧客識別子を受け取る。"""
        self._logged_in = logged_in
        self.customer_id = customer_id
        self.customer_group_id = customer_group_id

    def is_logged_in(self) -> bool:
        return self._logged_in

    def set_customer_id(self, customer_id: str | None) -> Self:
        self.customer_id = customer_id
        return self

    def set_customer_group_id(self, customer_group_id: str | None) -> Self:
        self.customer_group_id = customer_group_id
        return self


class InMemoryPersistentSessionAdapter(PersistentSessionPort):
    """永続フラグだけを持つ永続セッション。"""

    def __init__(self, *, persistent: bool = False) -> None:
        self.persistent = persistent

    def is_persistent(self) -> bool:
        return self.persistent


class InMemoryEventNotifierAdapter(EventNotifierPort):
    """配信履歴を記録し、購読リスナーへ同期配信する通知アダプタ。"""

    def __init__(self) -> None:
        """購読表と配信履歴を初期化する。"""
        self._listeners: dict[str, list[EventListener]] = {}
        self._dispatched: list[str] = []

    @property
    def dispatched_events(self) -> tuple[str, ...]:
        """配信済みイベント名を配信順に返す。"""
        return tuple(self._dispatched)

    def subscribe(self, event_name: str, listener: EventListener) -> None:
        """イベント名にリスナーを登録する。"""
        if not event_name:
            raise ValueError("event_name は空にできません。")
        self._listeners.setdefault(event_name, []).append(listener)

    def dispatch(self, event_name: str) -> None:
        """配信履歴へ記録し、登録順にリスナーを呼び出す。"""
        self._dispatched.append(event_name)
        for listener in tuple(self._listeners.get(event_name, ())):
            listener(event_name)


class StaticRequestSourceAdapter(RequestSourcePort):
    """固定の URI とヘッダーを返すリクエストソース。"""

    def __init__(self, request_uri: str = "/", headers: Mapping[str, str] | None = None) -> None:
        """URI とヘッダーを受け取る。ヘッダー名は大文字小文字を区別しない。"""
        self._request_uri = request_uri
        self._headers = {name.lower(): value for name, value in (headers or {}).items()}

    def get_request_uri(self) -> str:
        return self._request_uri

    def get_header(self, name: str) -> str | None:
        return self._headers.get(name.lower())
