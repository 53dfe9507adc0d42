"""Annotate a directory listing with catalog descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .catalog.loader import CatalogLoader
from .catalog.registry import DescriptionCatalog


@dataclass(frozen=True, slots=True)
class ListingRow:
    """One file in an annotated listing."""
    file_name: str
    size: int
    description: str | None = None


def annotate_directory(
    directory: str | Path,
    catalog: DescriptionCatalog | None = None,
    loader: CatalogLoader | None = None,
) -> list[ListingRow]:
    """
    List the regular files in a directory with their descriptions.

    The catalog file itself is left out. Files the catalog does not
    mention get a ``None`` description.
    """
    directory = Path(directory)
    loader = loader or CatalogLoader()
    if catalog is None:
        catalog = loader.load_directory(directory)

    skip = {name.lower() for name in loader.file_names}
    rows = []
    for path in sorted(directory.iterdir(), key=lambda p: p.name):
        if not path.is_file() or path.name.lower() in skip:
            continue
        rows.append(
            ListingRow(
                file_name=path.name,
                size=path.stat().st_size,
                description=catalog.description_of(path.name),
            )
        )
    return rows
