from __future__ import annotations

import httpx
import pytest

from page_digest.config import AppConfig
from page_digest.errors import FetchError, UnsupportedContentError
from page_digest.fetcher import fetch_page


def _fetch(run, mock_client, handler, url="https://example.com/a"):
    async def go():
        async with mock_client(handler) as client:
            return await fetch_page(url, AppConfig(), client)
    return run(go())


def test_fetch_returns_html_and_sends_user_agent(run, mock_client):
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["ua"] = request.headers.get("User-Agent")
        return httpx.Response(200, headers={"Content-Type": "text/html; charset=utf-8"}, text="<p>hi</p>")

    res = _fetch(run, mock_client, handler)
    assert res.status == 200
    assert res.html == "<p>hi</p>"
    assert res.url == "https://example.com/a"
    assert seen["ua"] == AppConfig().user_agent


def test_fetch_follows_redirects(run, mock_client):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.com/new"})
        return httpx.Response(200, headers={"Content-Type": "application/xhtml+xml"}, text="<p>moved</p>")

    res = _fetch(run, mock_client, handler, "https://example.com/old")
    assert res.url == "https://example.com/new"
    assert res.html == "<p>moved</p>"


def test_fetch_non_2xx_is_fetch_error(run, mock_client):
    def handler(request):
        return httpx.Response(404, headers={"Content-Type": "text/html"}, text="nope")

    with pytest.raises(FetchError) as ei:
        _fetch(run, mock_client, handler)
    assert ei.value.status_code == 502
    assert "(HTTP 404)" in ei.value.message


def test_fetch_rejects_non_html(run, mock_client):
    def handler(request):
        return httpx.Response(200, headers={"Content-Type": "application/pdf"}, content=b"%PDF")

    with pytest.raises(UnsupportedContentError) as ei:
        _fetch(run, mock_client, handler)
    assert ei.value.status_code == 415


def test_fetch_transport_error_is_fetch_error(run, mock_client):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(FetchError):
        _fetch(run, mock_client, handler)
