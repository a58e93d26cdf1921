from __future__ import annotations

import asyncio

import httpx
import pytest


@pytest.fixture
def run():
    return asyncio.run


@pytest.fixture
def mock_client():
    """Build an AsyncClient whose requests are answered by `handler`."""

    def _make(handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), follow_redirects=True)

    return _make


ARTICLE_HTML = """
<html>
  <head>
    <title>猫の生態 | Example News</title>
    <script>var x = "広告スクリプト";</script>
  </head>
  <body>
    <nav>ホーム / ニュース / 動物</nav>
    <header><h1>猫の生態</h1></header>
    <article>
      <p>猫は夜行性の動物です。</p>
      <p>猫は目が良く、暗闇でも活動できます。</p>
      <p>猫はペットとして人気です。</p>
    </article>
    <footer>© Example News</footer>
  </body>
</html>
"""


@pytest.fixture
def article_html():
    return ARTICLE_HTML
