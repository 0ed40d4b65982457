"""Pure functions for distances under a Minkowski p-norm.

p = 2 is the standard Euclidean distance (default), p = 1 the taxicab
distance, and p = inf the Chebyshev distance. Other p-norms are supported
as long as p >= 1.
"""

from __future__ import annotations

import math
from collections.abc import Callable

from somasim.core.vector.models import UnsupportedNormError, Vector2


def distance(a: Vector2, b: Vector2, p: float = 2.0) -> float:
    """Distance between two points using the p-norm.

    Args:
        a: First point.
        b: Second point.
        p: Exponent of the norm (default 2.0, Euclidean).

    Returns:
        Distance between a and b.

    Raises:
        UnsupportedNormError: If p < 1.
    """
    if p == 2:
        return math.dist(a, b)
    return distance_xy(a.x, a.y, b.x, b.y, p)


def distance_xy(ax: float, ay: float, bx: float, by: float, p: float = 2.0) -> float:
    """Distance between points (ax, ay) and (bx, by) using the p-norm.

    Args:
        ax: X coordinate of the first point.
        ay: Y coordinate of the first point.
        bx: X coordinate of the second point.
        by: Y coordinate of the second point.
        p: Exponent of the norm (default 2.0, Euclidean).

    Returns:
        Distance between the two points.

    Raises:
        UnsupportedNormError: If p < 1 (or NaN).
    """
    dx = ax - bx
    dy = ay - by

    if p == 2:
        return math.hypot(dx, dy)

    absdx = abs(dx)
    absdy = abs(dy)

    if p == 1:
        return absdx + absdy
    if p == math.inf:
        return max(absdx, absdy)
    if not p >= 1:
        raise UnsupportedNormError(p)

    # Scale by the larger component so |d|**p cannot overflow
    largest = max(absdx, absdy)
    if largest == 0:
        return 0.0
    return largest * ((absdx / largest) ** p + (absdy / largest) ** p) ** (1 / p)


def metric(p: float = 2.0) -> Callable[[Vector2, Vector2], float]:
    """Build a two-point distance function for a fixed p-norm.

    The norm is validated here rather than on first use.

    Args:
        p: Exponent of the norm (default 2.0, Euclidean).

    Returns:
        Function computing distance(a, b, p).

    Raises:
        UnsupportedNormError: If p < 1 (or NaN).
    """
    if not p >= 1:
        raise UnsupportedNormError(p)

    def _distance(a: Vector2, b: Vector2) -> float:
        return distance(a, b, p)

    return _distance
