"""Dense pheromone, heuristic and probability matrices.

All matrices are N x N numpy grids owned by a single colony. Pheromone is
deposited symmetrically since tour distances are symmetric.
"""

from typing import Sequence

import numpy as np

from ..core.config import MIN_DISTANCE, PHEROMONE_FLOOR


def initial_pheromone(n: int, value: float) -> np.ndarray:
    """Uniform pheromone grid."""
    return np.full((n, n), float(value), dtype=np.float64)


def heuristic_matrix(distances: np.ndarray, min_distance: float = MIN_DISTANCE) -> np.ndarray:
    """Inverse distance desirability, zero on the diagonal.

    Distances below ``min_distance`` (coincident targets) are clamped so the
    inverse stays finite.
    """
    eta = 1.0 / np.maximum(distances, min_distance)
    np.fill_diagonal(eta, 0.0)
    return eta


def probability_matrix(
    pheromone: np.ndarray,
    heuristic: np.ndarray,
    alpha: float,
    beta: float,
) -> np.ndarray:
    """Unnormalized transition weights ``tau^alpha * eta^beta``.

    Rows are normalized by each ant over its unvisited cities at choice time.
    """
    with np.errstate(over="ignore", invalid="ignore"):
        weights = np.power(pheromone, alpha) * np.power(heuristic, beta)
    np.fill_diagonal(weights, 0.0)
    return weights


def evaporate(pheromone: np.ndarray, rho: float, floor: float = PHEROMONE_FLOOR) -> None:
    """Decay every entry by ``(1 - rho)`` in place, never below ``floor``."""
    pheromone *= (1.0 - rho)
    np.maximum(pheromone, floor, out=pheromone)


def deposit(pheromone: np.ndarray, tour: Sequence[int], amount: float) -> None:
    """Add ``amount`` on every edge of the closed tour, both directions."""
    order = np.asarray(tour, dtype=np.intp)
    nxt = np.roll(order, -1)
    # np.add.at accumulates repeated edges (N = 2 walks the same edge twice)
    np.add.at(pheromone, (order, nxt), amount)
    np.add.at(pheromone, (nxt, order), amount)
