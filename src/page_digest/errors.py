from __future__ import annotations


class DigestError(Exception):
    """Base error; `message` is safe to show to end users."""

    status_code = 500

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidURLError(DigestError):
    status_code = 400


class FetchError(DigestError):
    status_code = 502


class UnsupportedContentError(DigestError):
    status_code = 415


class EmptyContentError(DigestError):
    status_code = 422


class RemoteSummaryError(DigestError):
    status_code = 502


class ConfigError(DigestError, ValueError):
    """Malformed configuration value; raised at startup, not per request."""
