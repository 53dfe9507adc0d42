"""DESCRIPT.ION file description catalogs."""

from .catalog import (
    CP437,
    CatalogEntry,
    CatalogLoader,
    DecodeTable,
    DescriptionCatalog,
    load_catalog,
)

__version__ = "0.1.0"

__all__ = [
    "CP437",
    "CatalogEntry",
    "CatalogLoader",
    "DecodeTable",
    "DescriptionCatalog",
    "load_catalog",
]
