"""Core functionalities: stateless math, color and sequence helpers.

Architecture Note:
    core/ contains pure, stateless functions and immutable value types.
    Each group (lists, vector, color) is independent of the others.
"""

from somasim.core.color import Color32, HexParseError, color_to_hex, hex_to_color
from somasim.core.lists import remove_at_unordered
from somasim.core.vector import (
    Norm,
    UnsupportedNormError,
    Vector2,
    distance,
    distance_xy,
    metric,
)

__all__ = [
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
