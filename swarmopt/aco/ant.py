"""Single tour-construction agent for the ant colony engine."""

import logging
import math
import random
from typing import List, Optional

import numpy as np

from ..tsp.distance import DistanceModel

logger = logging.getLogger(__name__)


def roulette_select(weights: np.ndarray, rng: random.Random) -> Optional[int]:
    """Pick an index with probability proportional to its weight.

    Uses one ``rng.random()`` draw and a cumulative-weight search.

    Args:
        weights: Non-negative weights
        rng: Random source

    Returns:
        Selected index, or None if the weights sum to zero or are not finite
    """
    total = float(np.sum(weights))
    if not math.isfinite(total) or total <= 0.0:
        return None

    cumulative = np.cumsum(weights)
    r = rng.random() * total
    idx = int(np.searchsorted(cumulative, r, side="right"))
    if idx >= len(weights):
        # Rounding pushed r past the last cumulative entry
        idx = int(np.flatnonzero(weights > 0)[-1])
    return idx


class Ant:
    """A tour under construction.

    Ants are recreated every colony iteration; nothing carries over between
    rounds.

    Attributes:
        tour: Visited cities in order, starting with the start city
        visited: Boolean mask of visited cities
        tour_length: Closed tour length once scored, else None
    """

    def __init__(self, n_cities: int, start_city: int):
        self.n_cities = n_cities
        self.tour: List[int] = []
        self.visited = np.zeros(n_cities, dtype=bool)
        self.tour_length: Optional[float] = None
        self.record_step(start_city)

    @property
    def current_city(self) -> int:
        return self.tour[-1]

    @property
    def start_city(self) -> int:
        return self.tour[0]

    @property
    def is_complete(self) -> bool:
        """True once every city has been visited."""
        return len(self.tour) == self.n_cities

    def unvisited(self) -> List[int]:
        return [int(c) for c in np.flatnonzero(~self.visited)]

    def choose_next(self, current_city: int, probability_row: np.ndarray, rng: random.Random) -> int:
        """Choose the next city from a row of the probability matrix.

        Visited cities get zero weight. When nothing is left to weigh
        (underflow, overflow or coincident targets) the choice is uniform
        among the unvisited cities.

        Args:
            current_city: City the ant stands on
            probability_row: Unnormalized transition weights from current_city
            rng: Random source

        Returns:
            An unvisited city index
        """
        if self.is_complete:
            raise ValueError("Ant has already visited every city")

        weights = np.where(self.visited, 0.0, probability_row)
        choice = roulette_select(weights, rng)
        if choice is None:
            logger.debug(f"Degenerate probability row at city {current_city}, choosing uniformly")
            choice = rng.choice(self.unvisited())
        return choice

    def record_step(self, city: int) -> None:
        """Append a city to the tour and mark it visited."""
        if self.visited[city]:
            raise ValueError(f"City {city} already visited")
        self.tour.append(int(city))
        self.visited[city] = True

    def length(self, distance_model: DistanceModel) -> float:
        """Closed tour length, cached once the tour is complete."""
        if self.tour_length is not None:
            return self.tour_length
        length = distance_model.tour_length(self.tour)
        if self.is_complete:
            self.tour_length = length
        return length

    def __repr__(self) -> str:
        return f"Ant(tour={self.tour}, length={self.tour_length})"
