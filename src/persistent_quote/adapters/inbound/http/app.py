"""FastAPI 上で永続セッション失効チェックを動かすデモホスト。"""

from __future__ import annotations

import os
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv
from fastapi import APIRouter, FastAPI, Request, Response

from persistent_quote.adapters.inbound.http.request_source import StarletteRequestSourceAdapter
from persistent_quote.adapters.inbound.http.schemas import (
    HealthResponse,
    QuoteResponse,
    SessionSnapshotResponse,
)
from persistent_quote.adapters.outbound.in_memory_session_components import (
    InMemoryCheckoutSessionAdapter,
    InMemoryCustomerSessionAdapter,
    InMemoryEventNotifierAdapter,
    InMemoryPersistenceConfigAdapter,
    InMemoryPersistentSessionAdapter,
)
from persistent_quote.application.use_cases.check_expire_persistent_quote import (
    CheckExpirePersistentQuoteUseCase,
)
from persistent_quote.domain.value_objects.persistence_event import (
    DEFAULT_AREA,
    PersistenceEvent,
)

PREDISPATCH_EVENT = "controller_action_predispatch"
_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off"})


@dataclass(slots=True)
class StorefrontSession:
    """1 訪問者分の in-memory セッション一式。"""

    persistence_config: InMemoryPersistenceConfigAdapter
    checkout_session: InMemoryCheckoutSessionAdapter
    customer_session: InMemoryCustomerSessionAdapter = field(
        default_factory=InMemoryCustomerSessionAdapter
    )
    persistent_session: InMemoryPersistentSessionAdapter = field(
        default_factory=InMemoryPersistentSessionAdapter
    )
    event_notifier: InMemoryEventNotifierAdapter = field(
        default_factory=InMemoryEventNotifierAdapter
    )


def create_app(*, storefront_session: StorefrontSession | None = None) -> FastAPI:
    """失効チェックをリクエストごとに実行する API アプリを構築する。"""
    _load_runtime_env()
    session = storefront_session or _build_default_storefront_session()

    app = FastAPI(
        title="Persistent Quote Expiry API",
        version="0.1.0",
    )
    app.state.storefront_session = session
    _register_middleware(app)
    _register_routes(app)
    return app


def _register_middleware(app: FastAPI) -> None:
    @app.middleware("http")
    async def check_expire_persistent_quote(
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        session: StorefrontSession = app.state.storefront_session
        use_case = CheckExpirePersistentQuoteUseCase(
            persistence_config=session.persistence_config,
            persistent_session=session.persistent_session,
            customer_session=session.customer_session,
            checkout_session=session.checkout_session,
            event_notifier=session.event_notifier,
            request_source=StarletteRequestSourceAdapter(request),
        )
        use_case.execute(PersistenceEvent(name=PREDISPATCH_EVENT))
        return await call_next(request)


def _register_routes(app: FastAPI) -> None:
    api = APIRouter(prefix="/api")

    @api.get("/health", response_model=HealthResponse)
    def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @api.get("/session", response_model=SessionSnapshotResponse)
    def session_snapshot() -> SessionSnapshotResponse:
        session: StorefrontSession = app.state.storefront_session
        quote = session.checkout_session.quote
        return SessionSnapshotResponse(
            logged_in=session.customer_session.is_logged_in(),
            customer_id=session.customer_session.customer_id,
            customer_group_id=session.customer_session.customer_group_id,
            persistent_session=session.persistent_session.is_persistent(),
            quote=(
                QuoteResponse(
                    quote_id=quote.quote_id,
                    is_persistent=quote.is_persistent,
                    customer_is_guest=quote.customer_is_guest,
                )
                if quote is not None
                else None
            ),
            expire_count=session.persistence_config.expire_call_count,
            dispatched_events=list(session.event_notifier.dispatched_events),
        )

    app.include_router(api)


def _build_default_storefront_session() -> StorefrontSession:
    checkout_session = InMemoryCheckoutSessionAdapter()
    persistence_config = InMemoryPersistenceConfigAdapter(
        checkout_session,
        enabled=_resolve_bool_env("PERSISTENT_ENABLED", default=True),
        shopping_cart_persist=_resolve_bool_env("PERSISTENT_SHOPPING_CART", default=True),
        processable_areas=_resolve_csv_env("PERSISTENT_PROCESSABLE_AREAS", default=(DEFAULT_AREA,)),
    )
    return StorefrontSession(
        persistence_config=persistence_config,
        checkout_session=checkout_session,
    )


def _resolve_bool_env(name: str, *, default: bool) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    normalized = raw_value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    return default


def _resolve_csv_env(name: str, *, default: tuple[str, ...]) -> tuple[str, ...]:
    raw_value = os.getenv(name, "")
    values = tuple(value.strip() for value in raw_value.split(",") if value.strip())
    return values or default


def _load_runtime_env() -> None:
    app_env = os.getenv("APP_ENV", "development")
    env_file = Path(f".env.{app_env}")
    if env_file.exists():
        load_dotenv(env_file, override=False)
    else:
        load_dotenv(override=False)
