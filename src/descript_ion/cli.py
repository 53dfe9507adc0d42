"""Command-line tool for inspecting DESCRIPT.ION catalogs.

Usage:
    descript-ion show /files/games/DESCRIPT.ION
    descript-ion lookup /files/games DOOM.ZIP
    descript-ion stats /files/games/DESCRIPT.ION
    descript-ion ls /files/games
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .catalog.codepage import get_decode_table
from .catalog.grammar import iter_parse_results
from .catalog.loader import CatalogLoader, find_catalog_file, read_catalog_bytes
from .catalog.types import Matched
from .config import Config, load_config
from .listing import annotate_directory

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_IO_ERROR = 1
EXIT_NOT_FOUND = 2


def _display(description: str, raw: bool) -> str:
    if raw:
        return description.replace("\r\n", "\\r\\n")
    return description.replace("\r\n", "\n    ")


def _catalog_path(path: Path, config: Config) -> Path:
    """Resolve a directory argument to the catalog file inside it."""
    if path.is_dir():
        found = find_catalog_file(path, config.catalog.file_names)
        if found is None:
            raise FileNotFoundError(f"No catalog file in {path}")
        return found
    return path


def cmd_show(args: argparse.Namespace, config: Config, loader: CatalogLoader) -> int:
    catalog = loader.load_file(_catalog_path(args.path, config))
    for entry in catalog.all_entries():
        print(f"{entry.file_name:<16} [{entry.program_id}] {_display(entry.description, args.raw)}")
    return EXIT_OK


def cmd_lookup(args: argparse.Namespace, config: Config, loader: CatalogLoader) -> int:
    catalog = loader.load_file(_catalog_path(args.path, config))
    description = catalog.description_of(args.name)
    if description is None:
        print(f"No description for {args.name}", file=sys.stderr)
        return EXIT_NOT_FOUND
    print(_display(description, args.raw))
    return EXIT_OK


def cmd_stats(args: argparse.Namespace, config: Config, loader: CatalogLoader) -> int:
    path = _catalog_path(args.path, config)
    text = loader.decode_table.decode(read_catalog_bytes(path))

    matched = discarded = 0
    names = set()
    for result in iter_parse_results(text):
        if isinstance(result, Matched):
            matched += 1
            names.add(result.entry.file_name)
        elif result.line:
            discarded += 1

    print(f"catalog:   {path}")
    print(f"matched:   {matched}")
    print(f"entries:   {len(names)}")
    print(f"discarded: {discarded}")
    return EXIT_OK


def cmd_ls(args: argparse.Namespace, config: Config, loader: CatalogLoader) -> int:
    for row in annotate_directory(args.directory, loader=loader):
        description = _display(row.description, args.raw) if row.description else ""
        print(f"{row.file_name:<16} {row.size:>10}  {description}")
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="descript-ion",
        description="Inspect DESCRIPT.ION file description catalogs",
    )
    parser.add_argument("--config", help="Path to a YAML config file")
    parser.add_argument("--code-page", help="Code page of the catalog (default: cp437)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    show = sub.add_parser("show", help="Print every entry in a catalog")
    show.add_argument("path", type=Path, help="Catalog file or directory")
    show.add_argument("--raw", action="store_true", help="Print line breaks as \\r\\n escapes")
    show.set_defaults(func=cmd_show)

    lookup = sub.add_parser("lookup", help="Print the description of one file")
    lookup.add_argument("path", type=Path, help="Catalog file or directory")
    lookup.add_argument("name", help="File name (case-sensitive)")
    lookup.add_argument("--raw", action="store_true", help="Print line breaks as \\r\\n escapes")
    lookup.set_defaults(func=cmd_lookup)

    stats = sub.add_parser(
        "stats",
        help="Count matched and discarded lines (blank lines are not counted)",
    )
    stats.add_argument("path", type=Path, help="Catalog file or directory")
    stats.set_defaults(func=cmd_stats)

    ls = sub.add_parser("ls", help="List a directory with descriptions")
    ls.add_argument("directory", type=Path)
    ls.add_argument("--raw", action="store_true", help="Print line breaks as \\r\\n escapes")
    ls.set_defaults(func=cmd_ls)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config, config_path = load_config(args.config)
        if args.code_page:
            config.catalog.code_page = args.code_page
        decode_table = get_decode_table(config.catalog.code_page)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.logging.level.upper(),
        format=config.logging.format,
    )
    logger.debug("Using config %s (code page %s)", config_path, decode_table.name)

    loader = CatalogLoader(decode_table, config.catalog.file_names)
    try:
        return args.func(args, config, loader)
    except OSError as e:
        logger.debug("Catalog read failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_IO_ERROR


if __name__ == "__main__":
    sys.exit(main())
