"""Traveling-salesman model of a target visiting problem.

This package provides:
- Coordinate and DistanceModel (closed-tour fitness)
- Tour rendering for logs
- TSPLIB instance loading
- Plant target grid layout
"""

from .distance import Coordinate, DistanceModel, format_tour
from .tsplib import load_tsplib, parse_tsplib
from .layout import PlantGridConfig, plant_target_grid
from .source import TargetSource, as_distance_model

__all__ = [
    "Coordinate",
    "DistanceModel",
    "format_tour",
    "load_tsplib",
    "parse_tsplib",
    "PlantGridConfig",
    "plant_target_grid",
    "TargetSource",
    "as_distance_model",
]
