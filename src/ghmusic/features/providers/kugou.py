"""Where: src/ghmusic/features/providers/kugou.py
What: Kugou keyword search plus per-track stream URL resolution.
Why: Kugou returns flat search rows keyed by a content hash and needs a second call to get audio.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Final, cast

from ghmusic.features.catalog.domain.models import RawRecord
from ghmusic.features.catalog.usecases.ports import SourceProfile
from ghmusic.platform.http import JSONFetcher, Throttle
from ghmusic.shared.errors import ProviderPayloadError

KUGOU_SEARCH_URL: Final[str] = "https://mobilecdn.kugou.com/api/v3/search/song"
KUGOU_PLAY_URL: Final[str] = "https://wwwapi.kugou.com/yy/index.php"
COVER_SIZE: Final[str] = "400"

KUGOU_PROFILE: Final[SourceProfile] = SourceProfile(
    name="kugou",
    id_prefix="kugou",
    unknown_artist="未知",
    unknown_title="未知歌曲",
)


def _text(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _data_section(payload: Any, context: str) -> dict[str, Any]:
    """Return ``payload['data']`` after checking Kugou's status fields."""

    if not isinstance(payload, dict):
        raise ProviderPayloadError(f"Kugou {context} response is not a JSON object")
    body = cast(dict[str, Any], payload)
    status = body.get("status")
    if status is not None and str(status) != "1":
        raise ProviderPayloadError(f"Kugou {context} status={status} error={body.get('error') or ''}")
    err_code = body.get("err_code", body.get("errcode"))
    if err_code not in (None, 0, "0"):
        raise ProviderPayloadError(f"Kugou {context} err_code={err_code}")
    data = body.get("data")
    if not isinstance(data, dict):
        raise ProviderPayloadError(f"Kugou {context} response has no data object")
    return cast(dict[str, Any], data)


def _cover_from(row: dict[str, Any]) -> str | None:
    trans = row.get("trans_param")
    if not isinstance(trans, dict):
        return None
    cover = _text(cast(dict[str, Any], trans).get("union_cover"))
    if cover is None:
        return None
    return cover.replace("{size}", COVER_SIZE)


def song_to_record(row: dict[str, Any]) -> RawRecord:
    """Translate one ``data.info[]`` search row.

    Kugou reports ``duration`` in seconds; it is carried as milliseconds.
    """

    duration = row.get("duration")
    duration_ms: float | None = None
    if isinstance(duration, (int, float)) and not isinstance(duration, bool):
        duration_ms = float(duration) * 1000
    elif isinstance(duration, str) and duration.strip().isdigit():
        duration_ms = float(duration) * 1000

    hash_value = _text(row.get("hash"))
    album_id = _text(row.get("album_id"))
    return RawRecord(
        source=KUGOU_PROFILE.name,
        native_id=hash_value.upper() if hash_value else None,
        title=_text(row.get("songname")),
        artist_name=_text(row.get("singername")),
        duration_ms=duration_ms,
        release_id=f"kugou-album-{album_id}" if album_id and album_id != "0" else None,
        release_title=_text(row.get("album_name")),
        cover=_cover_from(row),
        filename=_text(row.get("filename")),
    )


class KugouProvider:
    """Keyword search against Kugou's mobile API.

    ``search`` waits on the search throttle; ``resolve_audio`` waits on its own,
    shorter throttle before each play-data call.
    """

    profile: SourceProfile = KUGOU_PROFILE

    def __init__(
        self,
        fetcher: JSONFetcher,
        keywords: Sequence[str],
        *,
        page_size: int = 20,
        mid: str = "ghmusic",
        search_throttle: Throttle | None = None,
        resolve_throttle: Throttle | None = None,
    ) -> None:
        self._fetcher = fetcher
        self.queries: Sequence[str] = tuple(keywords)
        self.page_size: int = page_size
        self.mid: str = mid
        self._search_throttle: Throttle = search_throttle or Throttle(0.8)
        self._resolve_throttle: Throttle = resolve_throttle or Throttle(0.5)

    def search(self, query: str) -> list[RawRecord]:
        """Return one record per object row of ``data.info``.

        Non-object rows are dropped here, so positional fallback ids assigned
        during merging count kept rows, not positions in the raw response.
        """

        _ = self._search_throttle.wait()
        payload = self._fetcher.get_json(
            KUGOU_SEARCH_URL,
            {
                "format": "json",
                "keyword": query,
                "page": 1,
                "pagesize": self.page_size,
                "showtype": 1,
            },
        )
        data = _data_section(payload, "search")
        rows = data.get("info")
        if not isinstance(rows, list):
            return []
        return [
            song_to_record(cast(dict[str, Any], row))
            for row in cast(list[object], rows)
            if isinstance(row, dict)
        ]

    def resolve_audio(self, record: RawRecord) -> str | None:
        """Fetch a temporary stream URL keyed by the record's hash.

        Paywalled tracks answer with an empty ``play_url`` and resolve to None.
        """

        if not record.native_id:
            return None
        _ = self._resolve_throttle.wait()
        payload = self._fetcher.get_json(
            KUGOU_PLAY_URL,
            {"r": "play/getdata", "hash": record.native_id, "mid": self.mid},
            {"Cookie": f"kg_mid={self.mid}"},
        )
        data = _data_section(payload, "play")
        return _text(data.get("play_url")) or _text(data.get("play_backup_url"))


__all__ = [
    "KUGOU_PLAY_URL",
    "KUGOU_PROFILE",
    "KUGOU_SEARCH_URL",
    "KugouProvider",
    "song_to_record",
]
