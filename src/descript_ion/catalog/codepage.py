"""Decode tables - fixed single-byte code pages as explicit byte -> character maps."""

from __future__ import annotations

import codecs
from collections.abc import Sequence

REPLACEMENT_CHAR = "\ufffd"

# Field separator and line terminator bytes must decode to themselves
FIELD_BYTES = (0x04, 0x0A, 0x0D)

# IBM PC code page 437, bytes 0x80-0xFF. The lower half is plain ASCII so the
# 0x04 field separator and CR/LF survive decoding unchanged.
_CP437_HIGH = (
    "ÇüéâäàåçêëèïîìÄÅ"
    "ÉæÆôöòûùÿÖÜ¢£¥₧ƒ"
    "áíóúñÑªº¿⌐¬½¼¡«»"
    "░▒▓│┤╡╢╖╕╣║╗╝╜╛┐"
    "└┴┬├─┼╞╟╚╔╩╦╠═╬╧"
    "╨╤╥╙╘╒╓╫╪┘┌█▄▌▐▀"
    "αßΓπΣσµτΦΘΩδ∞φε∩"
    "≡±≥≤⌠⌡÷≈°∙·√ⁿ²■\u00a0"
)


class DecodeTable:
    """
    Immutable 256-entry table mapping each byte value to one character.

    Decoding never fails: every byte has a character, even if that character
    is the replacement placeholder.
    """

    __slots__ = ("name", "_chars", "_translation")

    def __init__(self, chars: Sequence[str], name: str = "custom"):
        chars = tuple(chars)
        if len(chars) != 256:
            raise ValueError(f"Decode table needs 256 entries, got {len(chars)}")
        for byte, char in enumerate(chars):
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Entry for byte 0x{byte:02X} must be a single character: {char!r}")

        self.name = name
        self._chars = chars
        self._translation = str.maketrans(
            {byte: char for byte, char in enumerate(chars) if char != chr(byte)}
        )

    @classmethod
    def from_codec(cls, codec_name: str) -> DecodeTable:
        """
        Build a table from a single-byte codec known to Python.

        Bytes the codec leaves undefined resolve to U+FFFD. Codecs that are
        not byte -> text, or that do not keep the 0x04 separator and CR/LF
        as themselves, are rejected.
        """
        try:
            info = codecs.lookup(codec_name)
        except LookupError as e:
            raise ValueError(f"Unknown code page: {codec_name}") from e

        not_single_byte = ValueError(f"Not a single-byte code page: {codec_name}")
        # bytes -> bytes transforms such as hex, zlib or rot13
        if not getattr(info, "_is_text_encoding", True):
            raise not_single_byte

        chars = []
        for byte in range(256):
            try:
                char = info.decode(bytes([byte]), "replace")[0]
            except (TypeError, ValueError) as e:
                raise not_single_byte from e
            if not isinstance(char, str):
                raise not_single_byte
            chars.append(char if len(char) == 1 else REPLACEMENT_CHAR)

        for separator in FIELD_BYTES:
            if chars[separator] != chr(separator):
                raise not_single_byte
        return cls(chars, name=info.name)

    def char_for(self, byte: int) -> str:
        """Character for a single byte value (0-255)."""
        return self._chars[byte]

    def decode(self, data: bytes) -> str:
        """Decode raw bytes, one character per byte."""
        # latin-1 is the identity map of bytes onto code points 0-255
        return data.decode("latin-1").translate(self._translation)

    def __len__(self) -> int:
        return len(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeTable):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self) -> int:
        return hash(self._chars)

    def __repr__(self) -> str:
        return f"DecodeTable(name={self.name!r})"


CP437 = DecodeTable([chr(b) for b in range(128)] + list(_CP437_HIGH), name="cp437")

_BUILTIN_TABLES = {
    "cp437": CP437,
    "ibm437": CP437,
}


def get_decode_table(name: str) -> DecodeTable:
    """Resolve a configured code page name to a decode table."""
    key = name.strip().lower().replace("-", "").replace("_", "")
    if key in _BUILTIN_TABLES:
        return _BUILTIN_TABLES[key]
    return DecodeTable.from_codec(name)
