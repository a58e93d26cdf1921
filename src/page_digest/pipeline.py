from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional, Tuple
import httpx
from .config import AppConfig
from .errors import EmptyContentError, RemoteSummaryError
from .fetcher import fetch_page, new_client
from .parser import extract_article
from .remote import is_configured, remote_summarize
from .summarizer import format_summary, summarize_locally
from .utils import validate_url

logger = logging.getLogger(__name__)

@dataclass
class PageSummary:
    title: str
    text: str
    source_url: str
    method: str  # "remote" | "local"

async def summarize_text(
    text: str,
    source_url: str,
    cfg: AppConfig,
    client: Optional[httpx.AsyncClient] = None,
) -> Tuple[str, str]:
    """Remote summarizer when configured, local engine otherwise or on any remote failure."""
    sc = cfg.summary
    if is_configured(cfg.remote):
        try:
            remote = await remote_summarize(text, source_url, cfg.remote, client)
            return format_summary(remote, sc.max_chars, sc.placeholder), "remote"
        except RemoteSummaryError as ex:
            logger.warning("remote summary failed for %s, using local: %s", source_url, ex.message)
    return summarize_locally(text, sc), "local"

async def summarize_page(url: str, cfg: AppConfig, client: Optional[httpx.AsyncClient] = None) -> PageSummary:
    url = validate_url(url)
    if client is None:
        async with new_client(cfg) as own:
            return await summarize_page(url, cfg, own)

    page = await fetch_page(url, cfg, client)
    article = extract_article(page.html, page.url)
    if not article.text.strip():
        raise EmptyContentError("本文が見つかりませんでした。")

    summary, method = await summarize_text(article.text, page.url, cfg, client)
    logger.info("summarized %s via %s (%d chars)", page.url, method, len(summary))
    return PageSummary(title=article.title, text=summary, source_url=page.url, method=method)
