import pytest

from persistent_quote.domain.services.checkout_page import is_request_from_checkout_page


@pytest.mark.parametrize(
    ("request_uri", "referer", "expected"),
    [
        ("/checkout/cart", "", True),
        ("/home", "https://site.example/checkout", True),
        ("/home", "", False),
        ("/home", None, False),
        ("/static/frontend/checkout/js/view.js", None, True),
        ("/Checkout/cart", "https://site.example/CHECKOUT", False),
    ],
)
def test_is_request_from_checkout_page(request_uri: str, referer: str | None, expected: bool) -> None:
    assert is_request_from_checkout_page(request_uri, referer) is expected
