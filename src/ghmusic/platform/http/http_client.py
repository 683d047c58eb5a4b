"""Where: src/ghmusic/platform/http/http_client.py
What: JSON-over-HTTP port and its ``requests`` implementation.
Why: Providers receive fetching as an injected capability so merge logic stays network-free in tests.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import requests

from ghmusic.platform.logging import logger
from ghmusic.shared.errors import FetchError


@runtime_checkable
class JSONFetcher(Protocol):
    """Fetch a JSON document or raise ``FetchError``."""

    def get_json(
        self,
        url: str,
        params: Mapping[str, str | int] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Return the decoded body of a successful GET request."""
        ...


class RequestsJSONClient:
    """Perform single-attempt GET requests through a shared ``requests.Session``.

    Failures are never retried: a transport error, a non-2xx status or a body
    that is not JSON all raise ``FetchError`` for the caller to handle.
    """

    def __init__(
        self,
        user_agent: str,
        *,
        timeout: float = 15.0,
        session: requests.Session | None = None,
    ) -> None:
        self.user_agent: str = user_agent
        self.timeout: float = timeout
        self._session: requests.Session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
            }
        )

    def get_json(
        self,
        url: str,
        params: Mapping[str, str | int] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        try:
            response = self._session.get(
                url,
                params=dict(params) if params else None,
                headers=dict(headers) if headers else None,
                timeout=(min(5.0, self.timeout), self.timeout),
            )
        except requests.RequestException as exc:
            raise FetchError(f"Request failed: {exc}", url=url) from exc

        status = int(response.status_code)
        if not 200 <= status < 300:
            raise FetchError(f"{status} {response.url}", url=url, status=status)

        try:
            data = response.json()
        except ValueError as exc:
            raise FetchError(f"Malformed JSON from {response.url}: {exc}", url=url, status=status) from exc

        logger.debug("GET %s -> %s", response.url, status)
        return data

    def close(self) -> None:
        """Release pooled connections."""

        self._session.close()


__all__ = ["JSONFetcher", "RequestsJSONClient"]
