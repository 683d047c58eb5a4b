"""Where: src/ghmusic/features/providers/musicbrainz.py
What: MusicBrainz WS2 recording search mapped onto raw catalog records.
Why: MusicBrainz supplies metadata and cover art ids but never a playable stream.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final, cast

from ghmusic.features.catalog.domain.models import RawRecord
from ghmusic.features.catalog.usecases.ports import SourceProfile
from ghmusic.platform.http import JSONFetcher, Throttle
from ghmusic.shared.errors import ProviderPayloadError

MB_RECORDING_URL: Final[str] = "https://musicbrainz.org/ws/2/recording"
COVER_ART_TEMPLATE: Final[str] = "https://coverartarchive.org/release/{release_id}/front-250"

MUSICBRAINZ_PROFILE: Final[SourceProfile] = SourceProfile(
    name="musicbrainz",
    id_prefix="musicbrainz",
    unknown_artist="Unknown",
    cover_template=COVER_ART_TEMPLATE,
)


def _dict_entries(value: Any) -> list[dict[str, Any]]:
    """Keep only the dictionary items of a JSON list."""

    if not isinstance(value, list):
        return []
    return [cast(dict[str, Any], entry) for entry in cast(list[object], value) if isinstance(entry, dict)]


def _first(value: Any) -> dict[str, Any]:
    entries = _dict_entries(value)
    return entries[0] if entries else {}


def recording_to_record(recording: dict[str, Any]) -> RawRecord:
    """Translate one ``recordings[]`` entry."""

    credit = _first(recording.get("artist-credit"))
    artist = credit.get("artist")
    artist = cast(dict[str, Any], artist) if isinstance(artist, dict) else {}
    release = _first(recording.get("releases"))

    return RawRecord(
        source=MUSICBRAINZ_PROFILE.name,
        native_id=recording.get("id"),
        title=recording.get("title"),
        artist_name=artist.get("name"),
        artist_id=artist.get("id"),
        duration_ms=recording.get("length"),
        release_id=release.get("id"),
        release_title=release.get("title"),
    )


def extract_recordings(payload: Any) -> list[dict[str, Any]]:
    """Filter the raw payload to a list of recording dictionaries."""

    if not isinstance(payload, dict):
        raise ProviderPayloadError("MusicBrainz response is not a JSON object")
    return _dict_entries(cast(dict[str, Any], payload).get("recordings"))


class MusicBrainzProvider:
    """Recording search against MusicBrainz WS2.

    Every search waits on ``throttle`` first so consecutive queries honour the
    published one-request-per-second policy.
    """

    profile: SourceProfile = MUSICBRAINZ_PROFILE

    def __init__(
        self,
        fetcher: JSONFetcher,
        queries: Sequence[str],
        *,
        limit: int = 15,
        throttle: Throttle | None = None,
    ) -> None:
        self._fetcher = fetcher
        self.queries: Sequence[str] = tuple(queries)
        self.limit: int = limit
        self._throttle: Throttle = throttle or Throttle(1.1)

    def search(self, query: str) -> list[RawRecord]:
        _ = self._throttle.wait()
        payload = self._fetcher.get_json(
            MB_RECORDING_URL,
            {"query": query, "fmt": "json", "limit": self.limit},
        )
        return [recording_to_record(recording) for recording in extract_recordings(payload)]

    def resolve_audio(self, record: RawRecord) -> str | None:
        _ = record
        return None


__all__ = [
    "COVER_ART_TEMPLATE",
    "MB_RECORDING_URL",
    "MUSICBRAINZ_PROFILE",
    "MusicBrainzProvider",
    "extract_recordings",
    "recording_to_record",
]
