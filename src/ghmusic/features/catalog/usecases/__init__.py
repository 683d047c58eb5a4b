"""Catalog use cases: accumulation, normalization and seed data."""

from .accumulator import CatalogAccumulator, artist_slug
from .merger import duration_seconds, merge_records, normalize_record, split_filename
from .ports import AudioResolver, CatalogProvider, SourceProfile
from .seeds import SEED_PROFILE, seed_records

__all__ = [
    "AudioResolver",
    "CatalogAccumulator",
    "CatalogProvider",
    "SEED_PROFILE",
    "SourceProfile",
    "artist_slug",
    "duration_seconds",
    "merge_records",
    "normalize_record",
    "seed_records",
    "split_filename",
]
