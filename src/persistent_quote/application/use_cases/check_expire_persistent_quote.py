"""永続セッション失効チェックのユースケース。"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from persistent_quote.domain.entities.quote import Quote, has_quote_id
from persistent_quote.domain.services.checkout_page import is_request_from_checkout_page
from persistent_quote.domain.value_objects.persistence_event import (
    PERSISTENT_SESSION_EXPIRED_EVENT,
    PersistenceEvent,
)
from persistent_quote.ports.outbound.checkout_session_port import CheckoutSessionPort
from persistent_quote.ports.outbound.customer_session_port import CustomerSessionPort
from persistent_quote.ports.outbound.event_notifier_port import EventNotifierPort
from persistent_quote.ports.outbound.persistence_config_port import PersistenceConfigPort
from persistent_quote.ports.outbound.persistent_session_port import PersistentSessionPort
from persistent_quote.ports.outbound.request_source_port import RequestSourcePort

_LOG = logging.getLogger(__name__)
_REFERER_HEADER = "Referer"


@dataclass(slots=True)
class _QuoteReader:
    """1 回の execute の間だけ quote を保持する。"""

    checkout_session: CheckoutSessionPort
    _quote: Quote | None = field(default=None, init=False)

    def get(self) -> Quote:
        if self._quote is None:
            self._quote = self.checkout_session.get_quote()
        return self._quote


class CheckExpirePersistentQuoteUseCase:
    """永続セッションが失効していればセッションデータを掃除する。"""

    def __init__(
        self,
        *,
        persistence_config: PersistenceConfigPort,
        persistent_session: PersistentSessionPort,
        customer_session: CustomerSessionPort,
        checkout_session: CheckoutSessionPort,
        event_notifier: EventNotifierPort,
        request_source: RequestSourcePort,
    ) -> None:
        """依存ポートを受けて初期化する。"""
        self._persistence_config = persistence_config
        self._persistent_session = persistent_session
        self._customer_session = customer_session
        self._checkout_session = checkout_session
        self._event_notifier = event_notifier
        self._request_source = request_source

    def execute(self, event: PersistenceEvent) -> None:
        """イベントごとに失効条件を評価し、該当すれば失効処理を行う。"""
        if not self._persistence_config.can_process(event):
            _LOG.debug("persistent quote check skipped: event=%s area=%s", event.name, event.area)
            return

        quote_reader = _QuoteReader(self._checkout_session)

        if self._is_persistent_quote_outdated(quote_reader):
            self._event_notifier.dispatch(PERSISTENT_SESSION_EXPIRED_EVENT)
            self._persistence_config.expire()
            self._checkout_session.clear_quote()
            _LOG.info(
                "outdated persistent quote cleared: event=%s quote_id=%s",
                event.name,
                quote_reader.get().quote_id,
            )
            return

        if (
            self._persistence_config.is_enabled()
            and not self._persistent_session.is_persistent()
            and not self._customer_session.is_logged_in()
            and has_quote_id(self._checkout_session.get_quote_id())
            and not self._is_request_from_checkout_page()
            and self._is_need_to_expire_session(quote_reader)
        ):
            self._event_notifier.dispatch(PERSISTENT_SESSION_EXPIRED_EVENT)
            self._persistence_config.expire()
            self._customer_session.set_customer_id(None).set_customer_group_id(None)
            _LOG.info(
                "persistent session expired: event=%s quote_id=%s",
                event.name,
                quote_reader.get().quote_id,
            )

    def _is_persistent_quote_outdated(self, quote_reader: _QuoteReader) -> bool:
        """永続機能が無効なのに quote が永続扱いのままかを返す。"""
        if (
            (
                not self._persistence_config.is_enabled()
                or not self._persistence_config.is_shopping_cart_persist()
            )
            and not self._customer_session.is_logged_in()
            and has_quote_id(self._checkout_session.get_quote_id())
        ):
            return quote_reader.get().is_persistent
        return False

    @staticmethod
    def _is_need_to_expire_session(quote_reader: _QuoteReader) -> bool:
        quote = quote_reader.get()
        return quote.is_persistent or quote.customer_is_guest

    def _is_request_from_checkout_page(self) -> bool:
        return is_request_from_checkout_page(
            request_uri=self._request_source.get_request_uri(),
            referer=self._request_source.get_header(_REFERER_HEADER),
        )
