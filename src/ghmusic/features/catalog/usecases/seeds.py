"""Summary: Built-in demo tracks that every catalog starts with.
Why: Guarantee a playable catalog even when every upstream provider fails.
"""

from __future__ import annotations

from typing import Final

from ghmusic.features.catalog.domain.models import RawRecord
from ghmusic.features.catalog.usecases.ports import SourceProfile

SEED_PROFILE: Final[SourceProfile] = SourceProfile(name="demo", id_prefix="demo")

_SEEDS: Final[tuple[tuple[str, str, int], ...]] = (
    ("1", "Ambient Flow", 180),
    ("2", "Calm Piano", 240),
    ("3", "Electronic Beat", 200),
)


def seed_records() -> list[RawRecord]:
    """Return the demo tracks as raw records in their fixed order."""

    return [
        RawRecord(
            source=SEED_PROFILE.name,
            native_id=f"demo-{number}",
            title=title,
            artist_name="Demo Artist",
            artist_id="demo-artist",
            duration_ms=seconds * 1000,
            release_id="demo-album",
            release_title="Demo Album",
            cover=f"https://picsum.photos/seed/music{number}/300/300",
            audio=f"https://www.soundhelix.com/examples/mp3/SoundHelix-Song-{number}.mp3",
        )
        for number, title, seconds in _SEEDS
    ]


__all__ = ["SEED_PROFILE", "seed_records"]
