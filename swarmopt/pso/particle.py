"""Permutation particle with move-operator velocity.

A particle's position is a tour (a permutation of city indices). Its
velocity is a list of operators ``(index, city, probability)``: with the
given probability, ``city`` is swapped into ``index`` of the working tour.
Operators are resolved against the tour at the time they fire, so applying
every operator toward a target tour in order reproduces that tour. Swaps
keep a permutation valid, and every move is followed by a repair step.
"""

import logging
import math
import random
from typing import List, Optional, Sequence, Tuple

from ..tsp.distance import DistanceModel, format_tour

logger = logging.getLogger(__name__)

MoveOperator = Tuple[int, int, float]

# Inertia operators weaker than this are dropped
MIN_MOVE_PROBABILITY = 0.01


def moves_toward(source: Sequence[int], target: Sequence[int]) -> List[Tuple[int, int]]:
    """Moves that transform ``source`` into ``target``.

    Args:
        source: Starting permutation
        target: Permutation to reach (same elements as source)

    Returns:
        (index, city) pairs, in index order, for every slot that differs
    """
    if len(source) != len(target):
        raise ValueError("Permutations must have the same length")
    return [(i, int(city)) for i, (have, city) in enumerate(zip(source, target)) if have != city]


def apply_move(tour: List[int], index: int, city: int) -> None:
    """Swap ``city`` into ``tour[index]`` in place.

    A city missing from the tour is written over the slot; the result then
    needs repair_permutation.
    """
    if city in tour:
        j = tour.index(city)
        tour[index], tour[j] = tour[j], tour[index]
    else:
        tour[index] = city


def repair_permutation(candidate: Sequence[int], n: int) -> List[int]:
    """Turn any sequence into a permutation of ``range(n)``.

    The first occurrence of every valid city is kept in place; duplicates,
    out-of-range entries and missing slots are filled with the missing
    cities in ascending order.
    """
    seen = set()
    repaired: List[Optional[int]] = []
    for city in list(candidate)[:n]:
        city = int(city)
        if 0 <= city < n and city not in seen:
            seen.add(city)
            repaired.append(city)
        else:
            repaired.append(None)
    repaired.extend([None] * (n - len(repaired)))

    missing = iter(c for c in range(n) if c not in seen)
    return [city if city is not None else next(missing) for city in repaired]


class Particle:
    """A candidate tour moving through permutation space.

    Attributes:
        position: Current tour
        velocity: Move operators applied on the next move
        length: Length of the current tour (inf until evaluated)
        best_position: Personal best tour
        best_length: Personal best length
    """

    def __init__(self, position: Sequence[int], velocity: Optional[List[MoveOperator]] = None):
        self.position = [int(c) for c in position]
        self.velocity: List[MoveOperator] = list(velocity or [])
        self.length = math.inf
        self.best_position = list(self.position)
        self.best_length = math.inf

    @property
    def n_cities(self) -> int:
        return len(self.position)

    def evaluate(self, distance_model: DistanceModel) -> float:
        """Score the current tour and keep it if it beats the personal best."""
        self.length = distance_model.tour_length(self.position)
        if self.length < self.best_length:
            self.best_length = self.length
            self.best_position = list(self.position)
        return self.length

    def update_velocity(
        self,
        self_trust: float,
        past_trust: float,
        global_trust: float,
        personal_best: Sequence[int],
        global_best: Sequence[int],
    ) -> None:
        """Blend inertia, personal-best pull and global-best pull.

        Args:
            self_trust: Decay applied to the previous operators
            past_trust: Probability of each move toward personal_best
            global_trust: Probability of each move toward global_best
            personal_best: Particle's best tour
            global_best: Swarm's best tour
        """
        inertia = [
            (i, city, p * self_trust)
            for i, city, p in self.velocity
            if p * self_trust >= MIN_MOVE_PROBABILITY
        ]
        toward_past = []
        if past_trust > 0.0:
            toward_past = [(i, city, past_trust) for i, city in moves_toward(self.position, personal_best)]

        # One operator per slot, so slots disturbed by the personal-best
        # moves are still pulled back toward the global best
        toward_global = []
        if global_trust > 0.0:
            toward_global = [(i, int(city), global_trust) for i, city in enumerate(global_best)]

        velocity = inertia + toward_past + toward_global
        limit = self.n_cities * self.n_cities
        self.velocity = velocity[-limit:]

    def apply_velocity(self, rng: random.Random) -> List[int]:
        """Move to a new tour.

        Args:
            rng: Random source deciding which operators fire

        Returns:
            The new position, always a valid permutation
        """
        position = list(self.position)
        for i, city, probability in self.velocity:
            if rng.random() < probability and 0 <= i < len(position):
                apply_move(position, i, city)

        repaired = repair_permutation(position, self.n_cities)
        if repaired != position:
            logger.debug(f"Repaired invalid permutation {position}")
        self.position = repaired
        return self.position

    def to_string(self) -> str:
        return format_tour(self.position)

    def __repr__(self) -> str:
        return f"Particle(position={self.position}, length={self.length})"
