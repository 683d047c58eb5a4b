"""HTTP infrastructure package.

Provides the JSON fetch port consumed by providers, a ``requests``-backed
implementation, the sequential throttle, and User-Agent etiquette helpers.
"""

from .http_client import JSONFetcher, RequestsJSONClient
from .rate_limit import Throttle
from .user_agent import format_user_agent, resolve_user_agent

__all__ = [
    "JSONFetcher",
    "RequestsJSONClient",
    "Throttle",
    "format_user_agent",
    "resolve_user_agent",
]
