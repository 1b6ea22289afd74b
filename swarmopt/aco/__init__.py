"""Ant Colony Optimization for target visiting tours.

This package provides:
- Ant: disposable per-iteration tour builder
- AntColony: pheromone-guided optimization loop
- Pheromone, heuristic and probability matrix helpers
"""

from .ant import Ant, roulette_select
from .colony import AntColony
from .pheromone import (
    initial_pheromone,
    heuristic_matrix,
    probability_matrix,
    evaporate,
    deposit,
)

# Name used by robot behaviors
AntColonyEngine = AntColony

__all__ = [
    "Ant",
    "roulette_select",
    "AntColony",
    "AntColonyEngine",
    "initial_pheromone",
    "heuristic_matrix",
    "probability_matrix",
    "evaporate",
    "deposit",
]
