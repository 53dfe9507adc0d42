"""
Entry grammar for DESCRIPT.ION lines.

One physical line looks like::

    FILENAME<SPC>DESC<0x04><program id><program data>

Long names containing spaces may be quoted: ``"MY FILE.ZIP" desc``.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

from .types import CatalogEntry, Matched, NoMatch, ParseResult

FIELD_SEPARATOR = "\x04"

# Only LF (optionally preceded by CR) ends a line; a bare CR does not.
_LINE_TERMINATOR = re.compile(r"\r?\n")

_ENTRY = re.compile(
    r'(?:"(?P<quoted>[^"]+)" |(?P<bare>[^ ]+) )'
    r"(?P<desc>[^\x04]+)\x04"
    r"(?P<program_id>[^\r\n])"
    r"(?P<program_data>[^\r\n]*)"
)

_ESCAPED_NEWLINE = re.compile(r"\\r\\n|\\n")


def split_lines(text: str) -> list[str]:
    """Split decoded catalog text into physical lines."""
    return _LINE_TERMINATOR.split(text)


def unescape_description(text: str) -> str:
    """Replace author-typed ``\\r\\n`` and ``\\n`` escapes with a real CR LF pair."""
    return _ESCAPED_NEWLINE.sub("\r\n", text)


def parse_line(line: str) -> ParseResult:
    """Apply the entry grammar to one physical line."""
    match = _ENTRY.fullmatch(line)
    if match is None:
        return NoMatch(line)

    return Matched(
        CatalogEntry(
            file_name=match.group("quoted") or match.group("bare"),
            description=unescape_description(match.group("desc")),
            program_id=match.group("program_id"),
            program_data=match.group("program_data"),
        )
    )


def iter_parse_results(text: str) -> Iterator[ParseResult]:
    """Yield one parse result per physical line, in file order."""
    for line in split_lines(text):
        yield parse_line(line)
