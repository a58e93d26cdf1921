from __future__ import annotations

import httpx
import pytest

from page_digest.config import AppConfig, RemoteConfig
from page_digest.errors import EmptyContentError, InvalidURLError
from page_digest.pipeline import summarize_page, summarize_text
from page_digest.summarizer import ELLIPSIS, SummaryConfig

LLM = "https://llm.example/v1/chat/completions"


def _remote_cfg(**summary) -> AppConfig:
    return AppConfig(
        summary=SummaryConfig(**summary),
        remote=RemoteConfig(enabled=True, api_key="sk-test", endpoint=LLM),
    )


def _site(article_html, llm_response=None):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "llm.example":
            return llm_response
        return httpx.Response(200, headers={"Content-Type": "text/html; charset=utf-8"}, text=article_html)
    return handler


def _summarize(run, mock_client, handler, cfg, url="https://example.com/cats"):
    async def go():
        async with mock_client(handler) as client:
            return await summarize_page(url, cfg, client)
    return run(go())


def test_local_summary_of_fetched_page(run, mock_client, article_html):
    page = _summarize(run, mock_client, _site(article_html), AppConfig())
    assert page.method == "local"
    assert page.title == "猫の生態 | Example News"
    assert page.source_url == "https://example.com/cats"
    assert page.text == "猫は目が良く、暗闇でも活動できます。"


def test_remote_summary_is_used_and_bounded(run, mock_client, article_html):
    long_answer = "リモート要約" * 10
    resp = httpx.Response(200, json={"choices": [{"message": {"content": long_answer}}]})
    page = _summarize(run, mock_client, _site(article_html, resp), _remote_cfg(max_chars=20))
    assert page.method == "remote"
    assert len(page.text) == 20
    assert page.text.endswith(ELLIPSIS)


def test_remote_failure_falls_back_to_local(run, mock_client, article_html, caplog):
    resp = httpx.Response(503, text="unavailable")
    page = _summarize(run, mock_client, _site(article_html, resp), _remote_cfg())
    assert page.method == "local"
    assert page.text == "猫は目が良く、暗闇でも活動できます。"
    assert "using local" in caplog.text


def test_page_without_text_is_empty_content_error(run, mock_client):
    html = "<html><head><title>T</title></head><body><script>x()</script></body></html>"
    with pytest.raises(EmptyContentError) as ei:
        _summarize(run, mock_client, _site(html), AppConfig())
    assert ei.value.status_code == 422


def test_invalid_url_is_rejected_before_fetch(run, mock_client):
    def handler(request):
        raise AssertionError("no request expected")

    with pytest.raises(InvalidURLError):
        _summarize(run, mock_client, handler, AppConfig(), url="example.com")


def test_summarize_text_without_remote_is_local(run):
    summary, method = run(summarize_text("短い本文。", "https://example.com", AppConfig()))
    assert (summary, method) == ("短い本文。", "local")
