"""Starlette リクエストを RequestSourcePort として公開するアダプタ。"""

from __future__ import annotations

from fastapi import Request

from persistent_quote.ports.outbound.request_source_port import RequestSourcePort


class StarletteRequestSourceAdapter(RequestSourcePort):
    """受信リクエストのパスとヘッダーを読み取る。"""

    def __init__(self, request: Request) -> None:
        self._request = request

    def get_request_uri(self) -> str:
        """パスとクエリ文字列を連結した URI を返す。"""
        path = self._request.url.path
        query = self._request.url.query
        return f"{path}?{query}" if query else path

    def get_header(self, name: str) -> str | None:
        return self._request.headers.get(name)
