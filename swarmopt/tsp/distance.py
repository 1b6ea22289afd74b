"""Euclidean distance model for closed visiting tours."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, Union

import numpy as np
from scipy.spatial.distance import cdist

from ..core.errors import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Coordinate:
    """A target location on the ground plane.

    Attributes:
        x: First ground axis (meters)
        y: Second ground axis (meters)
    """
    x: float
    y: float

    @classmethod
    def from_3d(cls, x: float, y: float, z: float) -> "Coordinate":
        """Project a 3D position onto the ground plane.

        The vertical axis is y; x and z span the ground.
        """
        return cls(float(x), float(z))

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)


CoordinateLike = Union[Coordinate, Tuple[float, float], Sequence[float]]


def _to_coordinate(value: CoordinateLike) -> Coordinate:
    if isinstance(value, Coordinate):
        return value
    x, y = value
    return Coordinate(float(x), float(y))


class DistanceModel:
    """Symmetric Euclidean distances between N targets.

    Index i of the coordinate sequence is city id i. The full matrix is
    computed once; D[i, j] == D[j, i] >= 0 and D[i, i] == 0.

    Example:
        model = DistanceModel([(0, 0), (0, 1), (1, 1), (1, 0)])
        model.tour_length([0, 1, 2, 3])  # 4.0
    """

    def __init__(self, coordinates: Iterable[CoordinateLike]):
        """Initialize distance model.

        Args:
            coordinates: Target positions, at least two

        Raises:
            ConfigurationError: If fewer than two coordinates are given
        """
        self.coordinates: List[Coordinate] = [_to_coordinate(c) for c in coordinates]
        if len(self.coordinates) < 2:
            raise ConfigurationError(
                f"At least 2 targets are required, got {len(self.coordinates)}"
            )

        points = np.array([c.as_tuple() for c in self.coordinates], dtype=np.float64)
        self._matrix = cdist(points, points, metric="euclidean")
        np.fill_diagonal(self._matrix, 0.0)
        self._matrix.setflags(write=False)

        logger.debug(f"Distance model built for {self.n} targets")

    @property
    def n(self) -> int:
        """Number of cities."""
        return len(self.coordinates)

    @property
    def matrix(self) -> np.ndarray:
        """Read-only N x N distance matrix."""
        return self._matrix

    def distance(self, i: int, j: int) -> float:
        return float(self._matrix[i, j])

    def tour_length(self, tour: Sequence[int]) -> float:
        """Length of the closed tour, including the edge back to the start.

        Args:
            tour: City indices in visiting order

        Returns:
            Total length of the closed loop

        Raises:
            ValueError: On an empty tour or a city id outside 0..n-1
        """
        if len(tour) == 0:
            raise ValueError("Tour must contain at least one city")
        order = np.asarray(tour, dtype=np.intp)
        if order.min() < 0 or order.max() >= self.n:
            raise ValueError(f"Tour contains a city outside 0..{self.n - 1}: {list(tour)}")
        return float(np.sum(self._matrix[order, np.roll(order, -1)]))

    def is_permutation(self, tour: Sequence[int]) -> bool:
        """Check that the tour visits every city exactly once."""
        return len(tour) == self.n and sorted(tour) == list(range(self.n))

    def __len__(self) -> int:
        return self.n

    def __repr__(self) -> str:
        return f"DistanceModel(n={self.n})"


def format_tour(tour: Sequence[int]) -> str:
    """Render a closed tour for logging, e.g. ``0 -> 2 -> 1 -> 0``."""
    if len(tour) == 0:
        return ""
    return " -> ".join(str(city) for city in list(tour) + [tour[0]])
