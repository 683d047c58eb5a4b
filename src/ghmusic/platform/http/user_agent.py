"""Where: src/ghmusic/platform/http/user_agent.py
What: Build MusicBrainz-compliant User-Agent strings.
Why: Centralise etiquette logic shared by the HTTP client and the CLI.
"""

from __future__ import annotations

import os
from collections.abc import Mapping

_ENV_USER_AGENT = "MUSICBRAINZ_USER_AGENT"


def format_user_agent(app_name: str, app_version: str, contact: str) -> str:
    """Return ``App/Version (contact)`` when contact information is available."""

    stripped = contact.strip()
    if stripped:
        return f"{app_name}/{app_version} ({stripped})"
    return f"{app_name}/{app_version}"


def resolve_user_agent(
    app_name: str,
    app_version: str,
    contact: str,
    env: Mapping[str, str] | None = None,
) -> str:
    """Prefer ``MUSICBRAINZ_USER_AGENT`` over the configured identity."""

    mapping = env if env is not None else os.environ
    override = (mapping.get(_ENV_USER_AGENT) or "").strip()
    if override:
        return override
    return format_user_agent(app_name, app_version, contact)


__all__ = ["format_user_agent", "resolve_user_agent"]
