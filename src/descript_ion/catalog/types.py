"""Catalog types - file description entries and per-line parse results."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CatalogEntry:
    """
    One parsed DESCRIPT.ION record.

    The description may contain real CR LF pairs produced by un-escaping
    author-typed ``\\r\\n`` / ``\\n`` sequences.
    """
    file_name: str          # Key within a catalog, case-sensitive, quotes stripped
    description: str
    program_id: str         # Single character following the 0x04 separator
    program_data: str = ""  # Rest of the line after the program tag


@dataclass(frozen=True, slots=True)
class Matched:
    """A physical line that matched the entry grammar."""
    entry: CatalogEntry


@dataclass(frozen=True, slots=True)
class NoMatch:
    """A physical line that did not match and is discarded."""
    line: str


ParseResult = Matched | NoMatch
