"""Summary: Normalize raw provider records into the catalog accumulator.
Why: Centralize defaults, id fallbacks and first-wins dedup so every provider merges the same way.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import replace
from typing import Final

from ghmusic.features.catalog.domain.models import Album, RawRecord, Track
from ghmusic.features.catalog.usecases.accumulator import CatalogAccumulator
from ghmusic.features.catalog.usecases.ports import AudioResolver, SourceProfile
from ghmusic.platform.logging import logger
from ghmusic.shared.errors import GhmusicError

FILENAME_SEPARATOR: Final[str] = " - "


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = str(value).strip()
    return stripped or None


def split_filename(filename: str | None) -> tuple[str | None, str | None]:
    """Split ``"Artist - Title"`` into its two segments.

    Returns ``(None, None)`` when the separator is absent.
    """

    cleaned = _clean(filename)
    if cleaned is None or FILENAME_SEPARATOR not in cleaned:
        return None, None
    artist, title = cleaned.split(FILENAME_SEPARATOR, 1)
    return _clean(artist), _clean(title)


def duration_seconds(duration_ms: int | float | str | None) -> int | None:
    """Milliseconds to whole seconds, rounding halves up."""

    if duration_ms is None or isinstance(duration_ms, bool):
        return None
    try:
        value = float(duration_ms)
    except (TypeError, ValueError, OverflowError):
        return None
    if not math.isfinite(value) or value < 0:
        return None
    return int(math.floor(value / 1000 + 0.5))


def resolve_cover(record: RawRecord, profile: SourceProfile) -> str | None:
    cover = _clean(record.cover)
    if cover:
        return cover
    release_id = _clean(record.release_id)
    if release_id and profile.cover_template:
        return profile.cover_template.format(release_id=release_id)
    return None


def _resolve_audio(
    record: RawRecord,
    track_id: str,
    profile: SourceProfile,
    resolve_audio: AudioResolver,
) -> str | None:
    try:
        return _clean(resolve_audio(record))
    except GhmusicError as exc:
        logger.warning(
            "Audio unavailable for %s track %s: %s",
            profile.name,
            track_id,
            exc,
            extra={
                "crawl_event": "crawl.track.degraded",
                "provider": profile.name,
                "track_id": track_id,
                "error": str(exc),
            },
        )
        return None


def normalize_record(
    record: RawRecord,
    index: int,
    accumulator: CatalogAccumulator,
    profile: SourceProfile,
) -> Track:
    """Build the ``Track`` for ``record`` without resolving audio.

    Args:
        record: Upstream record to normalize.
        index: Position of the record in its batch, used for fallback ids.
        accumulator: Supplies artist ids reused across records.
        profile: Source-specific defaults.
    """

    artist_name = _clean(record.artist_name)
    title = _clean(record.title)
    if artist_name is None or title is None:
        split_artist, split_title = split_filename(record.filename)
        artist_name = artist_name or split_artist
        title = title or split_title or _clean(record.filename)

    artist_name = artist_name or profile.unknown_artist
    artist_id = accumulator.artist_id_for(profile.name, artist_name, _clean(record.artist_id))
    track_id = _clean(record.native_id) or f"{profile.id_prefix}-{index}"

    release_id = _clean(record.release_id)
    return Track(
        id=track_id,
        title=title or profile.unknown_title,
        artist=artist_name,
        artist_id=artist_id,
        duration=duration_seconds(record.duration_ms),
        album=_clean(record.release_title),
        album_id=release_id,
        cover=resolve_cover(record, profile),
        audio=_clean(record.audio),
        source=profile.name,
    )


def _register_album(acc: CatalogAccumulator, track: Track) -> None:
    if track.album_id:
        _ = acc.register_album(
            Album(
                id=track.album_id,
                title=track.album,
                artist=track.artist,
                cover=track.cover,
            )
        )


def merge_records(
    records: Iterable[RawRecord],
    profile: SourceProfile,
    accumulator: CatalogAccumulator | None = None,
    *,
    resolve_audio: AudioResolver | None = None,
    start: int = 0,
) -> CatalogAccumulator:
    """Merge ``records`` into ``accumulator`` and return it.

    Positional fallback ids count from ``start`` so consecutive batches of one
    provider do not reuse the same fallback id within a run.

    The first occurrence of a track id always wins. A later record with the
    same id still registers its album (first-wins by album id) but adds no
    track, credits no artist and triggers no audio resolution. Audio is
    resolved only for records that survive dedup; a failed resolution leaves
    ``audio`` as None.
    """

    acc = accumulator if accumulator is not None else CatalogAccumulator()
    for index, record in enumerate(records, start):
        track = normalize_record(record, index, acc, profile)
        if acc.has_track(track.id):
            logger.debug("Skipping duplicate %s track %s", profile.name, track.id)
            _register_album(acc, track)
            continue

        if track.audio is None and resolve_audio is not None:
            audio = _resolve_audio(record, track.id, profile, resolve_audio)
            if audio is not None:
                track = replace(track, audio=audio)

        _ = acc.add_track(track)
        _register_album(acc, track)
    return acc


__all__ = [
    "FILENAME_SEPARATOR",
    "duration_seconds",
    "merge_records",
    "normalize_record",
    "resolve_cover",
    "split_filename",
]
