"""Color models: 8-bit RGBA value type and parse errors."""

from __future__ import annotations

from dataclasses import dataclass


class HexParseError(ValueError):
    """Raised when a string cannot be parsed as an "RRGGBB" hex color."""

    def __init__(self, value: str, reason: str):
        super().__init__(f"Cannot parse hex color {value!r}: {reason}")
        self.value = value


@dataclass(frozen=True, slots=True)
class Color32:
    """Immutable color with four 8-bit channels. Alpha defaults to opaque."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            # bool is an int subclass but never a meaningful channel value
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"Channel {name} must be an int, got {type(value).__name__}")
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be between 0 and 255, got {value}")
