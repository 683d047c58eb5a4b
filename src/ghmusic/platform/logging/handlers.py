"""Rich console handler aware of structured crawl events.

Where: platform/logging/handlers.py
What: Render ``crawl_event`` log records as compact, colour-coded lines.
Why: Keep per-query progress readable while plain messages fall back to Rich defaults.
"""

from __future__ import annotations

import logging
from typing import Any, Final

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

_EVENT_STYLES: Final[dict[str, tuple[str, str]]] = {
    "crawl.query.done": ("OK", "green"),
    "crawl.query.failed": ("SKIP", "yellow"),
    "crawl.track.degraded": ("NOAUDIO", "magenta"),
    "crawl.catalog.built": ("DONE", "bold cyan"),
}


class CrawlRichHandler(RichHandler):
    """Rich handler that formats structured crawl extras."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs.setdefault("show_path", False)
        kwargs.setdefault("markup", False)
        super().__init__(*args, **kwargs)

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "crawl_event", None)
        if not isinstance(event, str) or event not in _EVENT_STYLES:
            return super().render_message(record, message)

        label, style = _EVENT_STYLES[event]
        text = Text()
        _ = text.append(f"[{label}]", style=style)

        provider = getattr(record, "provider", None)
        if provider:
            _ = text.append(f" {provider}", style="bold")

        query = getattr(record, "query", None)
        if query is not None:
            _ = text.append(f" '{query}'")

        track_id = getattr(record, "track_id", None)
        if track_id is not None:
            _ = text.append(f" {track_id}", style="dim")

        count = getattr(record, "count", None)
        if count is not None:
            _ = text.append(f" -> {count} track(s)")

        error = getattr(record, "error", None)
        if error:
            _ = text.append(f" ({error})", style="red")

        return text


__all__ = ["CrawlRichHandler"]
