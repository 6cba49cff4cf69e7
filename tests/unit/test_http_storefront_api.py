from fastapi.testclient import TestClient

from persistent_quote.adapters.inbound.http.app import (
    StorefrontSession,
    _resolve_bool_env,
    _resolve_csv_env,
    create_app,
)
from persistent_quote.adapters.outbound.in_memory_session_components import (
    InMemoryCheckoutSessionAdapter,
    InMemoryCustomerSessionAdapter,
    InMemoryPersistenceConfigAdapter,
    InMemoryPersistentSessionAdapter,
)
from persistent_quote.domain.entities.quote import Quote


def _build_session(*, enabled: bool = True) -> StorefrontSession:
    checkout_session = InMemoryCheckoutSessionAdapter(
        Quote(quote_id="q-500", is_persistent=True, customer_is_guest=True)
    )
    return StorefrontSession(
        persistence_config=InMemoryPersistenceConfigAdapter(checkout_session, enabled=enabled),
        checkout_session=checkout_session,
        customer_session=InMemoryCustomerSessionAdapter(customer_id="9", customer_group_id="1"),
        persistent_session=InMemoryPersistentSessionAdapter(persistent=False),
    )


def test_health_endpoint_returns_ok() -> None:
    client = TestClient(create_app(storefront_session=_build_session()))

    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_request_from_checkout_keeps_customer_identity() -> None:
    client = TestClient(create_app(storefront_session=_build_session()))

    response = client.get(
        "/api/session",
        headers={"Referer": "https://site.example/checkout/"},
    )
    payload = response.json()

    assert response.status_code == 200
    assert payload["customer_id"] == "9"
    assert payload["customer_group_id"] == "1"
    assert payload["expire_count"] == 0
    assert payload["dispatched_events"] == []
    assert payload["quote"]["is_persistent"] is True


def test_request_away_from_checkout_expires_session() -> None:
    client = TestClient(create_app(storefront_session=_build_session()))

    response = client.get("/api/session")
    payload = response.json()

    assert response.status_code == 200
    assert payload["logged_in"] is False
    assert payload["customer_id"] is None
    assert payload["customer_group_id"] is None
    assert payload["expire_count"] == 1
    assert payload["dispatched_events"] == ["persistent_session_expired"]
    assert payload["quote"] == {
        "quote_id": "q-500",
        "is_persistent": False,
        "customer_is_guest": True,
    }


def test_disabled_persistence_clears_outdated_quote() -> None:
    client = TestClient(create_app(storefront_session=_build_session(enabled=False)))

    payload = client.get("/api/session").json()

    assert payload["quote"] is None
    assert payload["customer_id"] == "9"
    assert payload["expire_count"] == 1
    assert payload["dispatched_events"] == ["persistent_session_expired"]


def test_default_app_starts_with_empty_session(monkeypatch) -> None:
    monkeypatch.delenv("PERSISTENT_ENABLED", raising=False)
    client = TestClient(create_app())

    payload = client.get("/api/session").json()

    assert payload["quote"] is None
    assert payload["expire_count"] == 0
    assert payload["dispatched_events"] == []


def test_resolve_bool_env_parses_known_values(monkeypatch) -> None:
    monkeypatch.setenv("PERSISTENT_ENABLED", "off")
    assert _resolve_bool_env("PERSISTENT_ENABLED", default=True) is False

    monkeypatch.setenv("PERSISTENT_ENABLED", " YES ")
    assert _resolve_bool_env("PERSISTENT_ENABLED", default=False) is True


def test_resolve_bool_env_uses_default_on_missing_or_invalid(monkeypatch) -> None:
    monkeypatch.delenv("PERSISTENT_ENABLED", raising=False)
    assert _resolve_bool_env("PERSISTENT_ENABLED", default=True) is True

    monkeypatch.setenv("PERSISTENT_ENABLED", "maybe")
    assert _resolve_bool_env("PERSISTENT_ENABLED", default=False) is False


def test_resolve_csv_env_splits_and_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("PERSISTENT_PROCESSABLE_AREAS", "frontend, webapi_rest,,")
    assert _resolve_csv_env("PERSISTENT_PROCESSABLE_AREAS", default=("frontend",)) == (
        "frontend",
        "webapi_rest",
    )

    monkeypatch.setenv("PERSISTENT_PROCESSABLE_AREAS", " , ")
    assert _resolve_csv_env("PERSISTENT_PROCESSABLE_AREAS", default=("frontend",)) == ("frontend",)
