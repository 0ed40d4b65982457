"""Vector functionality: 2D points and p-norm distances."""

from somasim.core.vector.models import Norm, UnsupportedNormError, Vector2
from somasim.core.vector.operations import distance, distance_xy, metric

__all__ = [
    # Models
    "Vector2",
    "Norm",
    "UnsupportedNormError",
    # Operations
    "distance",
    "distance_xy",
    "metric",
]
