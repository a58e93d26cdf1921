from __future__ import annotations
from urllib.parse import urlparse
from .errors import InvalidURLError

def domain_of(url: str) -> str:
    return urlparse(url).netloc.lower()

def validate_url(raw: str | None) -> str:
    url = (raw or "").strip()
    if not url:
        raise InvalidURLError("URLを指定してください。")
    try:
        parsed = urlparse(url)
    except ValueError:
        raise InvalidURLError("正しい形式のURLを入力してください。")
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise InvalidURLError("正しい形式のURLを入力してください。")
    return url

def clip(text: str, limit: int) -> str:
    return text if len(text) <= limit else text[:limit]
