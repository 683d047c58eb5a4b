"""Catalog adapters."""

from .json_writer import CatalogJSONWriter, read_index

__all__ = ["CatalogJSONWriter", "read_index"]
