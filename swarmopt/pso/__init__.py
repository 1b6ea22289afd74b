"""Particle Swarm Optimization over tour permutations.

This package provides:
- Particle: tour position with move-operator velocity
- moves_toward / apply_move / repair_permutation helpers
- ParticleSwarm: self/past/global trust optimization loop
"""

from .particle import (
    Particle,
    MoveOperator,
    moves_toward,
    apply_move,
    repair_permutation,
)
from .swarm import ParticleSwarm

# Name used by robot behaviors
ParticleSwarmEngine = ParticleSwarm

__all__ = [
    "Particle",
    "MoveOperator",
    "moves_toward",
    "apply_move",
    "repair_permutation",
    "ParticleSwarm",
    "ParticleSwarmEngine",
]
