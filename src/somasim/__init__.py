"""SomaSim: small math and color utilities for game code.

Usage:
    from somasim import Vector2, Norm, distance, color_to_hex, hex_to_color

    distance(Vector2(0, 0), Vector2(3, 4))  # 5.0
    distance(Vector2(0, 0), Vector2(3, 4), Norm.TAXICAB.value)  # 7.0
    color_to_hex(Color32(255, 0, 128))  # "FF0080"
    hex_to_color("FF0080")  # Color32(r=255, g=0, b=128, a=255)
"""

__version__ = "0.1.0"

from somasim.core import (
    Color32,
    HexParseError,
    Norm,
    UnsupportedNormError,
    Vector2,
    color_to_hex,
    distance,
    distance_xy,
    hex_to_color,
    metric,
    remove_at_unordered,
)

__all__ = [
    # Version
    "__version__",
    # Lists
    "remove_at_unordered",
    # Vector
    "Vector2",
    "Norm",
    "UnsupportedNormError",
    "distance",
    "distance_xy",
    "metric",
    # Color
    "Color32",
    "HexParseError",
    "color_to_hex",
    "hex_to_color",
]
