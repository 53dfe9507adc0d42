"""Catalog registry - read-only index of DESCRIPT.ION entries by file name."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from types import MappingProxyType

from .codepage import CP437, DecodeTable
from .grammar import iter_parse_results
from .types import CatalogEntry, Matched


class DescriptionCatalog:
    """
    Index of file descriptions for one directory.

    Populated once at construction; afterwards it exposes no way to add,
    replace or remove entries, so any number of readers may share it.
    Lookups are exact and case-sensitive.
    """

    __slots__ = ("_entries", "_source_path")

    def __init__(
        self,
        entries: Iterable[CatalogEntry] = (),
        source_path: Path | None = None,
    ):
        index: dict[str, CatalogEntry] = {}
        for entry in entries:
            # Later duplicates replace earlier ones
            index[entry.file_name] = entry
        self._entries = MappingProxyType(index)
        self._source_path = source_path

    @property
    def source_path(self) -> Path | None:
        """File the catalog was read from, or None for in-memory data."""
        return self._source_path

    @classmethod
    def parse_from(
        cls,
        path: str | Path,
        decode_table: DecodeTable = CP437,
    ) -> DescriptionCatalog:
        """
        Read and parse a catalog file.

        Raises:
            OSError: If the file cannot be read (missing, permission, ...)
        """
        from .loader import CatalogLoader

        return CatalogLoader(decode_table).load_file(path)

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        decode_table: DecodeTable = CP437,
        source_path: Path | None = None,
    ) -> DescriptionCatalog:
        """Build a catalog from raw file content."""
        return cls.from_text(decode_table.decode(data), source_path=source_path)

    @classmethod
    def from_text(cls, text: str, source_path: Path | None = None) -> DescriptionCatalog:
        """Build a catalog from already-decoded text."""
        entries = (
            result.entry
            for result in iter_parse_results(text)
            if isinstance(result, Matched)
        )
        return cls(entries, source_path=source_path)

    def lookup(self, file_name: str) -> CatalogEntry | None:
        """Get the entry for a file name, or None."""
        return self._entries.get(file_name)

    def description_of(self, file_name: str) -> str | None:
        """Get the description for a file name, or None."""
        entry = self._entries.get(file_name)
        if entry is None:
            return None
        return entry.description

    def all_names(self) -> list[str]:
        return list(self._entries)

    def all_entries(self) -> list[CatalogEntry]:
        return list(self._entries.values())

    def __contains__(self, file_name: object) -> bool:
        return file_name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"DescriptionCatalog(entries={len(self._entries)}, source_path={self.source_path!r})"
