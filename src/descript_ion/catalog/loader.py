"""Catalog loader - reads DESCRIPT.ION files and builds a DescriptionCatalog."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from .codepage import CP437, DecodeTable
from .registry import DescriptionCatalog


logger = logging.getLogger(__name__)

CATALOG_FILE_NAMES = ("DESCRIPT.ION", "descript.ion")


def read_catalog_bytes(path: str | Path) -> bytes:
    """
    Read the complete raw content of a catalog file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        PermissionError: If the file can't be opened
        OSError: Any other read failure
    """
    with open(path, "rb") as f:
        return f.read()


def find_catalog_file(
    directory: str | Path,
    file_names: Sequence[str] = CATALOG_FILE_NAMES,
) -> Path | None:
    """
    Locate the catalog file inside a directory.

    Exact names are tried first, then a case-insensitive scan, since
    catalogs copied off DOS media arrive in any case.
    """
    directory = Path(directory)

    for name in file_names:
        candidate = directory / name
        if candidate.is_file():
            return candidate

    wanted = {name.lower() for name in file_names}
    for candidate in sorted(directory.iterdir()):
        if candidate.name.lower() in wanted and candidate.is_file():
            return candidate

    return None


class CatalogLoader:
    """
    Loads DESCRIPT.ION catalogs.

    File format (one entry per line, CP437)::

        README.TXT Read this first\\nThen the rest<0x04>d
        "LONG NAME.ZIP" Archive with a long name<0x04>x
    """

    def __init__(
        self,
        decode_table: DecodeTable = CP437,
        file_names: Sequence[str] = CATALOG_FILE_NAMES,
    ):
        self.decode_table = decode_table
        self.file_names = tuple(file_names)

    def load_file(self, path: str | Path) -> DescriptionCatalog:
        """Load a catalog from a file. OS errors propagate to the caller."""
        path = Path(path)
        logger.debug("Reading catalog file: %s", path)
        data = read_catalog_bytes(path)

        catalog = self.load_bytes(data, source_path=path)
        logger.info("Loaded %d catalog entries from %s", len(catalog), path)
        return catalog

    def load_bytes(self, data: bytes, source_path: Path | None = None) -> DescriptionCatalog:
        """Load a catalog from raw bytes."""
        return DescriptionCatalog.from_bytes(data, self.decode_table, source_path=source_path)

    def load_text(self, text: str) -> DescriptionCatalog:
        """Load a catalog from decoded text."""
        return DescriptionCatalog.from_text(text)

    def load_directory(self, directory: str | Path) -> DescriptionCatalog:
        """
        Load the catalog belonging to a directory.

        A directory without a catalog file yields an empty catalog.
        """
        directory = Path(directory)

        if not directory.is_dir():
            raise NotADirectoryError(f"Not a directory: {directory}")

        path = find_catalog_file(directory, self.file_names)
        if path is None:
            logger.debug("No catalog file in %s", directory)
            return DescriptionCatalog()

        return self.load_file(path)


def load_catalog(
    source: str | Path,
    decode_table: DecodeTable = CP437,
) -> DescriptionCatalog:
    """
    Convenience function to load a catalog.

    Args:
        source: Catalog file path, or a directory holding one
        decode_table: Code page the file is written in

    Returns:
        DescriptionCatalog with the parsed entries
    """
    loader = CatalogLoader(decode_table)

    path = Path(source)
    if path.is_dir():
        return loader.load_directory(path)
    else:
        return loader.load_file(path)
