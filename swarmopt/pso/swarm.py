"""Particle Swarm Optimization engine over tour permutations."""

import logging
import math
import random
import time
from typing import List, Optional, Tuple

from ..core.config import PSOConfig
from ..core.result import TourResult
from ..tsp.distance import format_tour
from ..tsp.source import TargetSource, as_distance_model
from .particle import Particle, moves_toward

logger = logging.getLogger(__name__)


class ParticleSwarm:
    """Permutation PSO for closed visiting tours.

    Each iteration evaluates every particle, updates the personal and then
    the global best, and moves every particle with its move-operator
    velocity. The run stops after ``max_iterations`` or as soon as the
    global best reaches ``target_length``.

    Example:
        swarm = ParticleSwarm(targets, PSOConfig.for_plant_survey(seed=3))
        distance = swarm.solve()
        logger.info(f"Shortest path: {swarm.best_position.to_string()}")
    """

    def __init__(self, targets: TargetSource, config: Optional[PSOConfig] = None):
        """Initialize swarm.

        Args:
            targets: DistanceModel, TSPLIB file path or coordinate sequence
            config: Engine configuration (defaults to PSOConfig())

        Raises:
            ConfigurationError: On fewer than 2 targets or invalid tunables
        """
        self.config = config or PSOConfig()
        self.tsp = as_distance_model(targets)

        if self.config.seed is not None:
            self.seed = self.config.seed
        else:
            self.seed = time.time_ns() % (2 ** 32)
            logger.info(f"No seed given, seeded from clock: {self.seed}")
        self._rng = random.Random(self.seed)

        self.particles: List[Particle] = [
            self._random_particle() for _ in range(self.config.n_particles)
        ]
        self.best_position: Optional[Particle] = None
        self.best_length = math.inf

        self.iterations = 0
        self.evaluations = 0
        self.history: List[Tuple[int, float]] = []

    @property
    def best_tour(self) -> List[int]:
        """Best tour found so far (empty before the first iteration)."""
        return list(self.best_position.best_position) if self.best_position is not None else []

    @property
    def terminated(self) -> bool:
        """True once the iteration budget is spent or the target is met."""
        if self.iterations >= self.config.max_iterations:
            return True
        target = self.config.target_length
        return target is not None and self.best_length <= target

    def solve(self) -> float:
        """Run iterations until termination.

        Returns:
            Best closed tour length found
        """
        cfg = self.config
        logger.info(
            f"PSO started: {self.tsp.n} targets, {cfg.n_particles} particles, "
            f"trust self={cfg.self_trust} past={cfg.past_trust} global={cfg.global_trust}"
        )
        while not self.terminated:
            self.step()

        logger.info(
            f"PSO finished after {self.iterations} iterations: best length {self.best_length:.4f}"
        )
        logger.debug(f"Best tour: {format_tour(self.best_tour)}")
        return self.best_length

    def step(self) -> float:
        """Run one swarm iteration.

        Returns:
            Global best length after this iteration
        """
        for particle in self.particles:
            particle.evaluate(self.tsp)
            self.evaluations += 1

        self._update_global_best()
        self.iterations += 1

        # Positions moved now would never be evaluated
        if self.terminated:
            return self.best_length

        cfg = self.config
        global_best = self.best_tour
        for particle in self.particles:
            particle.update_velocity(
                cfg.self_trust,
                cfg.past_trust,
                cfg.global_trust,
                particle.best_position,
                global_best,
            )
            particle.apply_velocity(self._rng)

        return self.best_length

    def result(self) -> TourResult:
        return TourResult(
            best_tour=self.best_tour,
            best_length=self.best_length,
            iterations=self.iterations,
            evaluations=self.evaluations,
            history=list(self.history),
            seed=self.seed,
            method="pso",
        )

    def _random_particle(self) -> Particle:
        n = self.tsp.n
        position = list(range(n))
        self._rng.shuffle(position)
        heading = list(range(n))
        self._rng.shuffle(heading)
        velocity = [(i, city, 1.0) for i, city in moves_toward(position, heading)]
        return Particle(position, velocity)

    def _update_global_best(self) -> None:
        """Replace the global best on strict improvement, first found wins."""
        candidate = None
        for particle in self.particles:
            best_so_far = candidate.best_length if candidate is not None else self.best_length
            if particle.best_length < best_so_far:
                candidate = particle

        if candidate is None:
            return

        # Snapshot, since the particle keeps moving
        snapshot = Particle(candidate.best_position)
        snapshot.length = snapshot.best_length = candidate.best_length
        self.best_position = snapshot
        self.best_length = candidate.best_length
        self.history.append((self.iterations + 1, self.best_length))
        logger.debug(f"Iteration {self.iterations + 1}: new best {self.best_length:.4f}")
