from __future__ import annotations
import logging
from typing import Optional
import httpx
from .config import RemoteConfig
from .errors import RemoteSummaryError
from .utils import clip

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = "You summarize web articles for a one-line preview."

def build_prompt(text: str, source_url: str) -> str:
    return (
        "Summarize the following article in one short sentence, in the article's own language. "
        "Do not add facts that are not in the text.\n\n"
        f"Source: {source_url}\n\n{text}"
    )

def is_configured(cfg: RemoteConfig) -> bool:
    return bool(cfg.enabled and cfg.api_key and cfg.endpoint)

async def remote_summarize(
    text: str,
    source_url: str,
    cfg: RemoteConfig,
    client: Optional[httpx.AsyncClient] = None,
) -> str:
    """
    Call an OpenAI-compatible chat completions endpoint.
    Every failure is raised as RemoteSummaryError so callers can fall back.
    """
    if not is_configured(cfg):
        raise RemoteSummaryError("remote summarizer is not configured")
    if client is None:
        async with httpx.AsyncClient(timeout=cfg.timeout_s) as own:
            return await remote_summarize(text, source_url, cfg, own)

    payload = {
        "model": cfg.model,
        "messages": [
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": build_prompt(clip(text, cfg.max_input_chars), source_url)},
        ],
        "temperature": 0,
    }
    try:
        r = await client.post(
            cfg.endpoint,
            headers={"Authorization": f"Bearer {cfg.api_key}", "Content-Type": "application/json"},
            json=payload,
            timeout=cfg.timeout_s,
        )
    except httpx.HTTPError as ex:
        raise RemoteSummaryError(f"remote request failed: {ex!r}") from ex

    if r.status_code != 200:
        raise RemoteSummaryError(f"remote returned HTTP {r.status_code}")
    try:
        content = r.json()["choices"][0]["message"]["content"]
    except (ValueError, KeyError, IndexError, TypeError) as ex:
        raise RemoteSummaryError("malformed remote response") from ex
    if not isinstance(content, str) or not content.strip():
        raise RemoteSummaryError("empty remote summary")
    return content.strip()
