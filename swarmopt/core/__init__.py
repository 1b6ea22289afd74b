"""Core configuration and error types."""

from .errors import ConfigurationError
from .config import (
    ACOConfig,
    PSOConfig,
    MIN_DISTANCE,
    PHEROMONE_FLOOR,
)

__all__ = [
    "ConfigurationError",
    "ACOConfig",
    "PSOConfig",
    "MIN_DISTANCE",
    "PHEROMONE_FLOOR",
]
