"""Summary: Catalog entities and the provider-neutral raw record.
Why: Give the merger, the providers and the JSON writer one shared vocabulary.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True, slots=True)
class RawRecord:
    """A single upstream result before normalization.

    Providers translate their payloads into this shape; every field may be
    missing. ``filename`` carries Kugou's combined ``"Artist - Title"`` string.
    """

    source: str
    native_id: str | None = None
    title: str | None = None
    artist_name: str | None = None
    artist_id: str | None = None
    duration_ms: int | float | None = None
    release_id: str | None = None
    release_title: str | None = None
    cover: str | None = None
    audio: str | None = None
    filename: str | None = None


@dataclass(frozen=True, slots=True)
class Track:
    """Normalized playable track."""

    id: str
    title: str
    artist: str
    artist_id: str
    duration: int | None = None
    album: str | None = None
    album_id: str | None = None
    cover: str | None = None
    audio: str | None = None
    source: str = "unknown"

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "artistId": self.artist_id,
            "duration": self.duration,
            "album": self.album,
            "albumId": self.album_id,
            "cover": self.cover,
            "audio": self.audio,
            "source": self.source,
        }


@dataclass(slots=True)
class Artist:
    """Artist with the ids of its tracks in discovery order."""

    id: str
    name: str
    tracks: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "tracks": list(self.tracks)}


@dataclass(frozen=True, slots=True)
class Album:
    """Album entry; ``artist`` is a display name, not a foreign key."""

    id: str
    title: str | None
    artist: str
    cover: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "title": self.title, "artist": self.artist, "cover": self.cover}


@dataclass(frozen=True, slots=True)
class CatalogMeta:
    """Envelope metadata written next to the collections."""

    updated: str
    total: int
    source: str | None = None

    def to_dict(self) -> dict[str, Any]:
        meta: dict[str, Any] = {"updated": self.updated, "total": self.total}
        if self.source:
            meta["source"] = self.source
        return meta


@dataclass(frozen=True, slots=True)
class Catalog:
    """Result of one crawl run, ready for serialization."""

    tracks: list[Track]
    artists: list[Artist]
    albums: list[Album]
    meta: CatalogMeta

    def to_dict(self) -> dict[str, Any]:
        return {
            "tracks": [track.to_dict() for track in self.tracks],
            "artists": [artist.to_dict() for artist in self.artists],
            "albums": [album.to_dict() for album in self.albums],
            "meta": self.meta.to_dict(),
        }


__all__ = ["Album", "Artist", "Catalog", "CatalogMeta", "RawRecord", "Track"]
