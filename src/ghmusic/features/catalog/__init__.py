"""Summary: Catalog feature public exports.
Why: Offer one import path for models, merge use cases and the JSON writer.
"""

from .adapters import CatalogJSONWriter, read_index
from .domain.models import Album, Artist, Catalog, CatalogMeta, RawRecord, Track
from .usecases import (
    CatalogAccumulator,
    CatalogProvider,
    SourceProfile,
    merge_records,
    seed_records,
)

__all__ = [
    "Album",
    "Artist",
    "Catalog",
    "CatalogAccumulator",
    "CatalogJSONWriter",
    "CatalogMeta",
    "CatalogProvider",
    "RawRecord",
    "SourceProfile",
    "Track",
    "merge_records",
    "read_index",
    "seed_records",
]
