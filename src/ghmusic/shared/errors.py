"""Summary: Exception hierarchy shared by crawl components.
Why: Let callers isolate per-query and per-track failures by catching one base type.
"""

from __future__ import annotations


class GhmusicError(Exception):
    """Base class for recoverable ghmusic failures."""


class FetchError(GhmusicError):
    """Raised when an HTTP fetch fails or returns an unusable body."""

    def __init__(self, message: str, *, url: str, status: int | None = None) -> None:
        super().__init__(message)
        self.url: str = url
        self.status: int | None = status


class ProviderPayloadError(GhmusicError):
    """Raised when a provider answers with JSON it marks as unsuccessful."""


class ConfigError(GhmusicError):
    """Raised when configuration values are invalid."""


__all__ = ["ConfigError", "FetchError", "GhmusicError", "ProviderPayloadError"]
