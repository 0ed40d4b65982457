"""Pure functions converting colors to and from "RRGGBB" hex strings."""

from __future__ import annotations

import string

from somasim.core.color.models import Color32, HexParseError

_HEX_LENGTH = 6
_HEX_DIGITS = frozenset(string.hexdigits)


def color_to_hex(color: Color32) -> str:
    """Convert a color to an HTML compatible hex value in "RRGGBB" format.

    Channels are rendered as uppercase, zero-padded pairs. Alpha is ignored
    and no "#" prefix is added.

    Args:
        color: Color to convert.

    Returns:
        Six character hex string, e.g. "FF0080".
    """
    return f"{color.r:02X}{color.g:02X}{color.b:02X}"


def hex_to_color(hex_string: str) -> Color32:
    """Convert an HTML compatible "RRGGBB" hex string to a color.

    Alpha is set to full opacity (255). Characters past the sixth are
    ignored. Each channel must be exactly two hex digits: a pair padded with
    whitespace (" F"), which lenient hex parsers accept, is rejected, as are
    signs, "0x" prefixes and underscores.

    Args:
        hex_string: String whose first six characters are hex digits.

    Returns:
        Parsed color.

    Raises:
        HexParseError: If the string is shorter than six characters or any
            channel is not a two digit hex number.
    """
    if len(hex_string) < _HEX_LENGTH:
        raise HexParseError(
            hex_string, f"expected {_HEX_LENGTH} characters, got {len(hex_string)}"
        )

    r, g, b = (_parse_byte(hex_string, start) for start in (0, 2, 4))
    return Color32(r, g, b, 255)


def _parse_byte(hex_string: str, start: int) -> int:
    pair = hex_string[start : start + 2]
    # int(..., 16) also accepts signs, whitespace and underscores
    if not all(c in _HEX_DIGITS for c in pair):
        raise HexParseError(hex_string, f"{pair!r} at index {start} is not a hex byte")
    return int(pair, 16)
