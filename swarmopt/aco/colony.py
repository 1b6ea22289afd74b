"""Ant Colony Optimization engine for closed visiting tours.

Each iteration runs the classic Ant System cycle:
1. Build a fresh colony, every ant on a start city
2. Construct tours by roulette-wheel selection over tau^alpha * eta^beta
3. Score the tours and keep the best (strict improvement only)
4. Evaporate pheromone
5. Deposit q / length on the edges of every tour
6. Check the iteration and tour budgets
"""

import logging
import math
import random
import time
from typing import List, Optional, Tuple

import numpy as np

from ..core.config import ACOConfig, MIN_DISTANCE
from ..core.errors import ConfigurationError
from ..core.result import TourResult
from ..tsp.distance import format_tour
from ..tsp.source import TargetSource, as_distance_model
from .ant import Ant
from .pheromone import (
    deposit,
    evaporate,
    heuristic_matrix,
    initial_pheromone,
    probability_matrix,
)

logger = logging.getLogger(__name__)


class AntColony:
    """Ant colony tour optimizer.

    Example:
        colony = AntColony([(0, 0), (0, 1), (1, 1), (1, 0)], ACOConfig.for_experiment(seed=1))
        length = colony.optimize()
        print(format_tour(colony.best_tour), length)
    """

    def __init__(self, targets: TargetSource, config: Optional[ACOConfig] = None):
        """Initialize colony.

        Args:
            targets: DistanceModel, TSPLIB file path or coordinate sequence
            config: Engine configuration (defaults to ACOConfig())

        Raises:
            ConfigurationError: On fewer than 2 targets or invalid tunables
        """
        self.config = config or ACOConfig()
        self.tsp = as_distance_model(targets)
        n = self.tsp.n

        if self.config.start_city is not None and self.config.start_city >= n:
            raise ConfigurationError(
                f"start_city {self.config.start_city} out of range for {n} targets"
            )

        if self.config.seed is not None:
            self.seed = self.config.seed
        else:
            self.seed = time.time_ns() % (2 ** 32)
            logger.info(f"No seed given, seeded from clock: {self.seed}")
        self._rng = random.Random(self.seed)

        self.pheromone = initial_pheromone(n, self.config.initial_pheromone)
        self.heuristic = heuristic_matrix(self.tsp.matrix)
        self.probability = np.zeros((n, n), dtype=np.float64)

        self.colony: List[Ant] = []
        self.best_ant: Optional[Ant] = None
        self.best_tour_length = math.inf

        self.iterations = 0
        self.tours = 0
        self.history: List[Tuple[int, float]] = []

    @property
    def best_tour(self) -> List[int]:
        """Best tour found so far (empty before the first iteration)."""
        return list(self.best_ant.tour) if self.best_ant is not None else []

    @property
    def terminated(self) -> bool:
        """True once either budget is used up."""
        cfg = self.config
        if cfg.max_iterations > 0 and self.iterations >= cfg.max_iterations:
            return True
        if cfg.max_tours > 0 and self.tours >= cfg.max_tours:
            return True
        return False

    def optimize(self) -> float:
        """Run iterations until a budget is exhausted.

        Returns:
            Best closed tour length found
        """
        logger.info(
            f"ACO started: {self.tsp.n} targets, {self.config.n_ants} ants, "
            f"alpha={self.config.alpha} beta={self.config.beta} rho={self.config.rho}"
        )
        while not self.terminated:
            self.step()

        logger.info(
            f"ACO finished after {self.iterations} iterations ({self.tours} tours): "
            f"best length {self.best_tour_length:.4f}"
        )
        logger.debug(f"Best tour: {format_tour(self.best_tour)}")
        return self.best_tour_length

    def step(self) -> float:
        """Run one full colony iteration.

        Returns:
            Shortest tour length of this iteration's colony
        """
        cfg = self.config
        self.probability = probability_matrix(self.pheromone, self.heuristic, cfg.alpha, cfg.beta)

        self.colony = self._create_colony()
        for ant in self.colony:
            self._construct_tour(ant)

        iteration_best = self._evaluate()

        evaporate(self.pheromone, cfg.rho, cfg.pheromone_floor)
        self._deposit_pheromone()

        self.iterations += 1
        return iteration_best.tour_length

    def result(self) -> TourResult:
        return TourResult(
            best_tour=self.best_tour,
            best_length=self.best_tour_length,
            iterations=self.iterations,
            evaluations=self.tours,
            history=list(self.history),
            seed=self.seed,
            method="aco",
        )

    def _create_colony(self) -> List[Ant]:
        n = self.tsp.n
        colony = []
        for _ in range(self.config.n_ants):
            if self.config.start_city is not None:
                start = self.config.start_city
            else:
                start = self._rng.randrange(n)
            colony.append(Ant(n, start))
        return colony

    def _construct_tour(self, ant: Ant) -> None:
        while not ant.is_complete:
            current = ant.current_city
            nxt = ant.choose_next(current, self.probability[current], self._rng)
            ant.record_step(nxt)
        ant.length(self.tsp)
        self.tours += 1

    def _evaluate(self) -> Ant:
        """Score the colony and replace the global best on strict improvement."""
        iteration_best = self.colony[0]
        for ant in self.colony[1:]:
            if ant.tour_length < iteration_best.tour_length:
                iteration_best = ant

        if iteration_best.tour_length < self.best_tour_length:
            self.best_ant = iteration_best
            self.best_tour_length = iteration_best.tour_length
            self.history.append((self.iterations + 1, self.best_tour_length))
            logger.debug(
                f"Iteration {self.iterations + 1}: new best {self.best_tour_length:.4f}"
            )
        return iteration_best

    def _deposit_pheromone(self) -> None:
        for ant in self.colony:
            amount = self.config.q / max(ant.tour_length, MIN_DISTANCE)
            deposit(self.pheromone, ant.tour, amount)
