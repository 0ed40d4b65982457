"""Shared test fixtures."""

import pytest

from somasim import Vector2


@pytest.fixture
def origin():
    """Point at (0, 0)."""
    return Vector2(0.0, 0.0)


@pytest.fixture
def three_four():
    """Point at (3, 4): Euclidean 5, taxicab 7, Chebyshev 4 from the origin."""
    return Vector2(3.0, 4.0)
