"""Summary: Serialize a catalog into the static API files read by the player.
Why: Keep file layout and atomic replacement out of the crawl orchestration.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Final

from ghmusic.config.file_ops import write_text_atomic
from ghmusic.features.catalog.domain.models import Catalog
from ghmusic.platform.logging import logger

INDEX_FILE: Final[str] = "index.json"
TRACKS_FILE: Final[str] = "tracks.json"
ARTISTS_FILE: Final[str] = "artists.json"
ALBUMS_FILE: Final[str] = "albums.json"


def _dump(payload: dict[str, Any]) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"


class CatalogJSONWriter:
    """Write ``index.json`` plus one file per collection under ``output_dir``."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir: Path = output_dir

    def write(self, catalog: Catalog) -> list[Path]:
        """Persist ``catalog`` and return the written paths in write order."""

        document = catalog.to_dict()
        files: dict[str, dict[str, Any]] = {
            INDEX_FILE: document,
            TRACKS_FILE: {"tracks": document["tracks"]},
            ARTISTS_FILE: {"artists": document["artists"]},
            ALBUMS_FILE: {"albums": document["albums"]},
        }

        written: list[Path] = []
        for name, payload in files.items():
            path = self.output_dir / name
            write_text_atomic(path, _dump(payload))
            written.append(path)
        logger.info("Wrote %d track(s) to %s", catalog.meta.total, self.output_dir)
        return written


def read_index(path: Path) -> dict[str, Any]:
    """Load a previously written ``index.json``."""

    with open(path, encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"{path} does not contain a JSON object")
    return data


__all__ = [
    "ALBUMS_FILE",
    "ARTISTS_FILE",
    "CatalogJSONWriter",
    "INDEX_FILE",
    "TRACKS_FILE",
    "read_index",
]
