"""Configuration settings using Pydantic Settings.

Usage:
    from somasim.config import DistanceSettings

    # Load from environment variables (SOMASIM_DISTANCE_*)
    settings = DistanceSettings()

    # Or override with explicit values
    settings = DistanceSettings(norm=float("inf"))
"""

from __future__ import annotations

from collections.abc import Callable

from somasim.core.vector import Vector2, metric

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install somasim[config]"
    ) from e


class DistanceSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for distance computations.

    Attributes:
        norm: Minkowski p-norm exponent (1 = taxicab, 2 = Euclidean,
            inf = Chebyshev). Must be >= 1.

    Environment Variables:
        SOMASIM_DISTANCE_NORM
    """

    model_config = SettingsConfigDict(
        env_prefix="SOMASIM_DISTANCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    norm: float = Field(default=2.0, ge=1.0)

    def metric(self) -> Callable[[Vector2, Vector2], float]:
        """Distance function for the configured norm."""
        return metric(self.norm)
