"""チェックアウトページ由来リクエストの判定。"""

from __future__ import annotations

CHECKOUT_PAGE_PATH = "checkout"


def is_request_from_checkout_page(request_uri: str, referer: str | None) -> bool:
    """URI か Referer に checkout を含むかを返す。

    パス解析ではなく部分一致で判定するため、checkout 配下のアセットや
    AJAX 呼び出しも対象に含まれる。
    """
    referer_uri = referer or ""
    return CHECKOUT_PAGE_PATH in request_uri or CHECKOUT_PAGE_PATH in referer_uri
