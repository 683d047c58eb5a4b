"""Summary: Tests for raw record normalization and first-wins merging.
Why: Guard the defaults, fallback ids and dedup rules the JSON consumers rely on.
"""

from __future__ import annotations

import logging

import pytest
from pytest import LogCaptureFixture

from ghmusic.features.catalog import CatalogAccumulator, RawRecord, merge_records
from ghmusic.features.catalog.usecases import (
    SEED_PROFILE,
    SourceProfile,
    duration_seconds,
    seed_records,
    split_filename,
)
from ghmusic.shared.errors import FetchError

MB = SourceProfile(
    name="musicbrainz",
    id_prefix="musicbrainz",
    unknown_artist="Unknown",
    cover_template="https://coverartarchive.org/release/{release_id}/front-250",
)
KUGOU = SourceProfile(name="kugou", id_prefix="kugou", unknown_artist="未知", unknown_title="未知歌曲")


def _mb(**fields: object) -> RawRecord:
    return RawRecord(source="musicbrainz", **fields)  # type: ignore[arg-type]


def _kugou(**fields: object) -> RawRecord:
    return RawRecord(source="kugou", **fields)  # type: ignore[arg-type]


def test_first_record_wins_for_duplicate_ids() -> None:
    """Scenario: x1/A/Bob followed by x1/A-dup/Bob2 keeps the first."""

    acc = merge_records(
        [
            _mb(native_id="x1", title="A", artist_name="Bob", duration_ms=180000),
            _mb(native_id="x1", title="A-dup", artist_name="Bob2"),
        ],
        MB,
    )

    catalog = acc.build()
    assert len(catalog.tracks) == 1
    track = catalog.tracks[0]
    assert (track.title, track.artist, track.duration) == ("A", "Bob", 180)
    assert [artist.name for artist in catalog.artists] == ["Bob"]


def test_duplicate_record_still_registers_new_album() -> None:
    acc = merge_records(
        [
            _mb(native_id="x1", title="A", artist_name="Bob"),
            _mb(native_id="x1", title="A-dup", artist_name="Bob2", release_id="rel-9", release_title="Live"),
            _mb(native_id="x2", title="B", artist_name="Carol", release_id="rel-9", release_title="Other"),
        ],
        MB,
    )

    assert list(acc.tracks) == ["x1", "x2"]
    assert acc.tracks["x1"].album_id is None
    assert list(acc.albums) == ["rel-9"]
    assert (acc.albums["rel-9"].title, acc.albums["rel-9"].artist) == ("Live", "Bob2")
    assert [artist.name for artist in acc.artists.values()] == ["Bob", "Carol"]


def test_missing_artist_uses_sentinel_and_groups_under_one_id() -> None:
    acc = merge_records(
        [
            _mb(native_id="r1", title="One"),
            _mb(native_id="r2", title="Two", artist_name="   "),
            _mb(native_id="r3", title="Three", artist_name=None),
        ],
        MB,
    )

    tracks = list(acc.tracks.values())
    assert {track.artist for track in tracks} == {"Unknown"}
    assert len({track.artist_id for track in tracks}) == 1
    assert len(acc.artists) == 1
    assert next(iter(acc.artists.values())).tracks == ["r1", "r2", "r3"]


def test_kugou_unknown_artist_sentinel() -> None:
    acc = merge_records([_kugou(native_id="H1", title="歌")], KUGOU)

    assert acc.tracks["H1"].artist == "未知"


@pytest.mark.parametrize(
    ("duration_ms", "expected"),
    [
        (180000, 180),
        (1499, 1),
        (1500, 2),
        (242870, 243),
        (0, 0),
        (None, None),
        ("not-a-number", None),
        (-5, None),
        (10**400, None),
    ],
)
def test_duration_seconds(duration_ms: object, expected: int | None) -> None:
    assert duration_seconds(duration_ms) == expected  # type: ignore[arg-type]


def test_missing_duration_is_null() -> None:
    acc = merge_records([_mb(native_id="r1", title="T", artist_name="A")], MB)

    assert acc.tracks["r1"].duration is None


def test_positional_fallback_id_for_kugou_record_without_hash() -> None:
    records = [
        _kugou(native_id="H0", filename="A - zero"),
        _kugou(native_id="H1", filename="A - one"),
        _kugou(native_id="H2", filename="A - two"),
        _kugou(filename="周杰伦 - 晴天"),
    ]

    acc = merge_records(records, KUGOU)

    assert "kugou-3" in acc.tracks
    track = acc.tracks["kugou-3"]
    assert track.title == "晴天"
    assert track.artist == "周杰伦"


def test_fallback_ids_continue_from_start_offset() -> None:
    acc = merge_records([_kugou(filename="A - b")], KUGOU, start=20)

    assert list(acc.tracks) == ["kugou-20"]


def test_filename_fills_only_missing_fields() -> None:
    acc = merge_records(
        [_kugou(native_id="H1", title="Explicit", filename="Someone - Other")],
        KUGOU,
    )

    track = acc.tracks["H1"]
    assert track.title == "Explicit"
    assert track.artist == "Someone"


def test_filename_without_separator_becomes_title() -> None:
    acc = merge_records([_kugou(native_id="H1", filename="纯音乐")], KUGOU)

    track = acc.tracks["H1"]
    assert track.title == "纯音乐"
    assert track.artist == "未知"


def test_untitled_sentinel_when_nothing_to_recover() -> None:
    acc = merge_records([_mb(native_id="r1", artist_name="A")], MB)

    assert acc.tracks["r1"].title == "Untitled"


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("Artist - Title", ("Artist", "Title")),
        ("A - B - C", ("A", "B - C")),
        ("NoSeparator", (None, None)),
        (None, (None, None)),
        (" Artist  -  Title ", ("Artist", "Title")),
    ],
)
def test_split_filename(filename: str | None, expected: tuple[str | None, str | None]) -> None:
    assert split_filename(filename) == expected


def test_cover_from_release_template_and_album_registration() -> None:
    acc = merge_records(
        [
            _mb(native_id="r1", title="T1", artist_name="A", release_id="rel-1", release_title="First"),
            _mb(native_id="r2", title="T2", artist_name="B", release_id="rel-1", release_title="Renamed"),
            _mb(native_id="r3", title="T3", artist_name="C"),
        ],
        MB,
    )

    assert acc.tracks["r1"].cover == "https://coverartarchive.org/release/rel-1/front-250"
    assert acc.tracks["r3"].cover is None
    assert acc.tracks["r3"].album_id is None
    assert list(acc.albums) == ["rel-1"]
    album = acc.albums["rel-1"]
    assert (album.title, album.artist) == ("First", "A")
    assert album.cover == "https://coverartarchive.org/release/rel-1/front-250"


def test_direct_cover_beats_template() -> None:
    acc = merge_records(
        [_mb(native_id="r1", title="T", release_id="rel", cover="https://img/direct.jpg")],
        MB,
    )

    assert acc.tracks["r1"].cover == "https://img/direct.jpg"


def test_upstream_artist_id_is_used() -> None:
    acc = merge_records(
        [
            _mb(native_id="r1", title="T", artist_name="Bob", artist_id="mbid-bob"),
            _mb(native_id="r2", title="U", artist_name="Bob", artist_id="mbid-bob"),
        ],
        MB,
    )

    assert list(acc.artists) == ["mbid-bob"]
    assert acc.artists["mbid-bob"].tracks == ["r1", "r2"]


def test_same_name_without_upstream_id_collapses() -> None:
    acc = merge_records(
        [
            _kugou(native_id="H1", title="a", artist_name="陈奕迅"),
            _kugou(native_id="H2", title="b", artist_name="陈奕迅"),
        ],
        KUGOU,
    )

    assert list(acc.artists) == ["kugou-artist-陈奕迅"]
    assert acc.artists["kugou-artist-陈奕迅"].tracks == ["H1", "H2"]


def test_failed_audio_resolution_keeps_track(caplog: LogCaptureFixture) -> None:
    calls: list[str | None] = []

    def resolver(record: RawRecord) -> str | None:
        calls.append(record.native_id)
        if record.native_id == "H1":
            raise FetchError("402 paywalled", url="https://example.invalid", status=402)
        return f"https://cdn/{record.native_id}.mp3"

    with caplog.at_level(logging.WARNING, logger="ghmusic"):
        acc = merge_records(
            [
                _kugou(native_id="H1", title="paid", artist_name="A"),
                _kugou(native_id="H2", title="free", artist_name="A"),
            ],
            KUGOU,
            resolve_audio=resolver,
        )

    assert calls == ["H1", "H2"]
    assert acc.tracks["H1"].audio is None
    assert acc.tracks["H2"].audio == "https://cdn/H2.mp3"
    assert "H1" in caplog.text


def test_resolver_not_called_for_duplicates_or_existing_audio() -> None:
    calls: list[str | None] = []

    def resolver(record: RawRecord) -> str | None:
        calls.append(record.native_id)
        return None

    _ = merge_records(
        [
            _kugou(native_id="H1", title="a", audio="https://direct/a.mp3"),
            _kugou(native_id="H2", title="b"),
            _kugou(native_id="H2", title="b-dup"),
        ],
        KUGOU,
        resolve_audio=resolver,
    )

    assert calls == ["H2"]


def test_seed_tracks_win_over_upstream_records() -> None:
    acc = CatalogAccumulator()
    _ = merge_records(seed_records(), SEED_PROFILE, acc)
    _ = merge_records(
        [
            _mb(native_id="demo-1", title="Impostor", artist_name="Someone"),
            _mb(native_id="r1", title="Real", artist_name="Someone"),
        ],
        MB,
        acc,
    )

    catalog = acc.build()
    assert [track.id for track in catalog.tracks] == ["demo-1", "demo-2", "demo-3", "r1"]
    assert catalog.tracks[0].title == "Ambient Flow"
    assert catalog.tracks[0].source == "demo"
    assert catalog.artists[0].id == "demo-artist"
    assert catalog.artists[0].tracks == ["demo-1", "demo-2", "demo-3"]
    assert [album.id for album in catalog.albums] == ["demo-album"]
