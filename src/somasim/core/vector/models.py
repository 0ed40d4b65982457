"""Vector models: 2D point value type, named norms, and errors.

Usage:
    a = Vector2(0.0, 0.0)
    b = Vector2(3.0, 4.0)
    Norm.TAXICAB.get_metric()(a, b)  # 7.0
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from enum import Enum


class UnsupportedNormError(ValueError):
    """Raised when a distance is requested with a p-norm below 1."""

    def __init__(self, p: float):
        super().__init__(f"Unsupported norm: p={p!r} (p-norm must be >= 1)")
        self.p = p


@dataclass(frozen=True, slots=True)
class Vector2:
    """Immutable 2D point or vector."""

    x: float = 0.0
    y: float = 0.0

    def __iter__(self) -> Iterator[float]:
        """Allow Vector2 to be used where an (x, y) sequence is expected."""
        yield self.x
        yield self.y

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def magnitude(self) -> float:
        """Euclidean length of this vector."""
        return math.hypot(self.x, self.y)


class Norm(Enum):
    """Named special cases of the Minkowski p-norm."""

    TAXICAB = 1.0  # Sum of absolute differences
    EUCLIDEAN = 2.0  # Straight-line distance (default)
    CHEBYSHEV = math.inf  # Chess king distance, max across dimensions

    def get_metric(self) -> Callable[[Vector2, Vector2], float]:
        """Get the distance function for this norm.

        Returns:
            Pure function computing the distance between two points.
        """
        # Late import to avoid circular dependency
        from somasim.core.vector import operations

        return operations.metric(self.value)
