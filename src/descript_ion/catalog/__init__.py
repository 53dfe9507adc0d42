"""Catalog system - DESCRIPT.ION file description index."""

from .types import CatalogEntry, Matched, NoMatch, ParseResult
from .codepage import CP437, DecodeTable, get_decode_table
from .grammar import iter_parse_results, parse_line, split_lines, unescape_description
from .registry import DescriptionCatalog
from .loader import (
    CATALOG_FILE_NAMES,
    CatalogLoader,
    find_catalog_file,
    load_catalog,
    read_catalog_bytes,
)

__all__ = [
    "CatalogEntry",
    "Matched",
    "NoMatch",
    "ParseResult",
    "CP437",
    "DecodeTable",
    "get_decode_table",
    "iter_parse_results",
    "parse_line",
    "split_lines",
    "unescape_description",
    "DescriptionCatalog",
    "CATALOG_FILE_NAMES",
    "CatalogLoader",
    "find_catalog_file",
    "load_catalog",
    "read_catalog_bytes",
]
