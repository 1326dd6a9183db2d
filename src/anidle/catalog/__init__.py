"""Anime catalog: records, title index and JSON loading."""

from .catalog import Catalog
from .loader import load_catalog, parse_catalog_data, read_catalog_file
from .models import AnimeRecord, Season

__all__ = [
    "AnimeRecord",
    "Catalog",
    "Season",
    "load_catalog",
    "parse_catalog_data",
    "read_catalog_file",
]
