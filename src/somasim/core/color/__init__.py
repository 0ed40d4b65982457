"""Color functionality: 8-bit colors and hex string conversion."""

from somasim.core.color.models import Color32, HexParseError
from somasim.core.color.operations import color_to_hex, hex_to_color

__all__ = [
    # Models
    "Color32",
    "HexParseError",
    # Operations
    "color_to_hex",
    "hex_to_color",
]
