"""Swarm-intelligence tour planning for robot target visits.

This package provides:
- Euclidean TSP distance model and target layouts
- Ant Colony Optimization engine
- Permutation Particle Swarm Optimization engine
- A small planning facade used by robot behaviors
"""

from .core import ACOConfig, PSOConfig, ConfigurationError
from .tsp import Coordinate, DistanceModel, format_tour
from .aco import Ant, AntColony
from .pso import Particle, ParticleSwarm
from .planning import TourResult, plan_tour

__all__ = [
    "ACOConfig",
    "PSOConfig",
    "ConfigurationError",
    "Coordinate",
    "DistanceModel",
    "format_tour",
    "Ant",
    "AntColony",
    "Particle",
    "ParticleSwarm",
    "TourResult",
    "plan_tour",
]
