"""Summary: Ordered in-memory accumulation of tracks, artists and albums.
Why: Replace ambient module-level maps with one value the merge step receives and returns.
"""

from __future__ import annotations

from datetime import datetime, timezone

from ghmusic.features.catalog.domain.models import (
    Album,
    Artist,
    Catalog,
    CatalogMeta,
    Track,
)


def artist_slug(source: str, name: str) -> str:
    """Namespaced artist id derived from a display name."""

    return f"{source}-artist-{name}"


class CatalogAccumulator:
    """Three insertion-ordered maps owned by a single crawl run.

    Insertion is first-wins for every collection: a track, artist or album id
    seen once is never replaced by a later record.
    """

    def __init__(self) -> None:
        self.tracks: dict[str, Track] = {}
        self.artists: dict[str, Artist] = {}
        self.albums: dict[str, Album] = {}
        self._artist_ids_by_name: dict[tuple[str, str], str] = {}

    def has_track(self, track_id: str) -> bool:
        return track_id in self.tracks

    def artist_id_for(self, source: str, name: str, upstream_id: str | None = None) -> str:
        """Reuse or compute the artist id for ``name`` within ``source``."""

        if upstream_id:
            _ = self._artist_ids_by_name.setdefault((source, name), upstream_id)
            return upstream_id
        key = (source, name)
        existing = self._artist_ids_by_name.get(key)
        if existing is not None:
            return existing
        artist_id = artist_slug(source, name)
        self._artist_ids_by_name[key] = artist_id
        return artist_id

    def add_track(self, track: Track) -> bool:
        """Record ``track`` and credit it to its artist; False when the id exists."""

        if track.id in self.tracks:
            return False
        self.tracks[track.id] = track
        artist = self.artists.get(track.artist_id)
        if artist is None:
            artist = Artist(id=track.artist_id, name=track.artist)
            self.artists[track.artist_id] = artist
        artist.tracks.append(track.id)
        return True

    def register_album(self, album: Album) -> bool:
        if album.id in self.albums:
            return False
        self.albums[album.id] = album
        return True

    def sources(self) -> list[str]:
        """Provenance tags in order of first contribution."""

        seen: dict[str, None] = {}
        for track in self.tracks.values():
            seen.setdefault(track.source, None)
        return list(seen)

    def build(self, updated: datetime | None = None) -> Catalog:
        """Freeze the accumulated state into a ``Catalog``."""

        stamp = (updated or datetime.now(timezone.utc)).astimezone(timezone.utc)
        tracks = list(self.tracks.values())
        sources = self.sources()
        meta = CatalogMeta(
            updated=stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
            total=len(tracks),
            source=",".join(sources) if sources else None,
        )
        return Catalog(
            tracks=tracks,
            artists=[Artist(a.id, a.name, list(a.tracks)) for a in self.artists.values()],
            albums=list(self.albums.values()),
            meta=meta,
        )


__all__ = ["CatalogAccumulator", "artist_slug"]
