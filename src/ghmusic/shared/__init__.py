"""Shared exports used across feature packages."""

from .errors import ConfigError, FetchError, GhmusicError, ProviderPayloadError

__all__ = ["ConfigError", "FetchError", "GhmusicError", "ProviderPayloadError"]
