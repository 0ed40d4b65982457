"""Configuration module using Pydantic Settings.

Usage:
    from somasim.config import DistanceSettings

    settings = DistanceSettings(norm=1.0)
    dist = settings.metric()
"""

from somasim.config.settings import DistanceSettings

__all__ = [
    "DistanceSettings",
]
