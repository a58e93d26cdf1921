from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Optional
import httpx
from .config import AppConfig
from .errors import FetchError, UnsupportedContentError

logger = logging.getLogger(__name__)

HTML_TYPES = ("text/html", "application/xhtml+xml")

@dataclass
class FetchResult:
    url: str  # final URL after redirects
    status: int
    content_type: str
    html: str

def _is_html(content_type: str) -> bool:
    ct = content_type.lower()
    return any(t in ct for t in HTML_TYPES)

def new_client(cfg: AppConfig) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        headers={"User-Agent": cfg.user_agent},
        timeout=httpx.Timeout(cfg.timeout_s),
        follow_redirects=True,
        http2=True,
    )

async def fetch_page(url: str, cfg: AppConfig, client: Optional[httpx.AsyncClient] = None) -> FetchResult:
    if client is None:
        async with new_client(cfg) as own:
            return await fetch_page(url, cfg, own)

    try:
        r = await client.get(url, headers={"User-Agent": cfg.user_agent}, follow_redirects=True)
    except httpx.HTTPError as ex:
        logger.warning("fetch failed for %s: %r", url, ex)
        raise FetchError("ページの取得に失敗しました。") from ex

    status = r.status_code
    if not 200 <= status < 300:
        raise FetchError(f"ページの取得に失敗しました。(HTTP {status})")

    ct = r.headers.get("Content-Type", "")
    if not _is_html(ct):
        raise UnsupportedContentError("HTMLページ以外は要約できません。")

    logger.debug("fetched %s status=%s bytes=%s", r.url, status, len(r.content))
    return FetchResult(url=str(r.url), status=status, content_type=ct, html=r.text)
