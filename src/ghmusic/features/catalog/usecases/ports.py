"""Summary: Ports and per-source profiles consumed by the catalog merger.
Why: Keep the merger independent of concrete providers so it can be tested with plain records.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from ghmusic.features.catalog.domain.models import RawRecord

AudioResolver = Callable[[RawRecord], "str | None"]


@dataclass(frozen=True, slots=True)
class SourceProfile:
    """Normalization defaults that differ between providers.

    Attributes:
        name: Provenance tag written to ``Track.source``.
        id_prefix: Prefix of positional fallback ids (``"<prefix>-<index>"``).
        unknown_artist: Sentinel used when a record carries no artist name.
        unknown_title: Sentinel used when no title can be recovered.
        cover_template: Format string with a ``{release_id}`` placeholder, or None.
    """

    name: str
    id_prefix: str
    unknown_artist: str = "Unknown"
    unknown_title: str = "Untitled"
    cover_template: str | None = None


@runtime_checkable
class CatalogProvider(Protocol):
    """Port implemented by every upstream metadata source."""

    profile: SourceProfile
    queries: Sequence[str]

    def search(self, query: str) -> list[RawRecord]:
        """Fetch one query's results, raising ``GhmusicError`` on failure."""
        ...

    def resolve_audio(self, record: RawRecord) -> str | None:
        """Return a playable URL for ``record`` or None when the source has none."""
        ...


__all__ = ["AudioResolver", "CatalogProvider", "SourceProfile"]
