"""Configuration management for swarm tour optimizers."""

from dataclasses import dataclass
from typing import Optional

from .errors import ConfigurationError

# Distances below this are treated as this value in heuristic and deposit denominators
MIN_DISTANCE = 1e-10

# Pheromone never evaporates below this level
PHEROMONE_FLOOR = 1e-12


@dataclass
class ACOConfig:
    """Configuration for the ant colony engine.

    Attributes:
        n_ants: Number of ants built every iteration
        alpha: Pheromone weight in the transition rule
        beta: Heuristic (inverse distance) weight in the transition rule
        rho: Evaporation rate, strictly between 0 and 1
        q: Deposit scale, each ant deposits q / tour_length per edge
        initial_pheromone: Uniform starting value of every pheromone entry
        pheromone_floor: Lower bound kept after evaporation
        max_iterations: Iteration budget (0 = unbounded by iterations)
        max_tours: Constructed-tour budget (0 = unbounded by tours)
        start_city: Fixed start city for every ant (None = random start)
        seed: RNG seed (None = seeded from wall-clock time)
    """

    n_ants: int = 10
    alpha: float = 1.0
    beta: float = 1.0
    rho: float = 0.2
    q: float = 1.0
    initial_pheromone: float = 1.0
    pheromone_floor: float = PHEROMONE_FLOOR

    # Termination
    max_iterations: int = 0
    max_tours: int = 10000

    start_city: Optional[int] = None
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration."""
        if self.n_ants < 1:
            raise ConfigurationError(f"n_ants must be positive, got {self.n_ants}")
        if self.alpha < 0 or self.beta < 0:
            raise ConfigurationError(
                f"alpha and beta must be non-negative, got alpha={self.alpha} beta={self.beta}"
            )
        if not 0.0 < self.rho < 1.0:
            raise ConfigurationError(f"rho must be in (0, 1), got {self.rho}")
        if self.q <= 0:
            raise ConfigurationError(f"q must be positive, got {self.q}")
        if self.pheromone_floor <= 0:
            raise ConfigurationError(f"pheromone_floor must be positive, got {self.pheromone_floor}")
        if self.initial_pheromone < self.pheromone_floor:
            raise ConfigurationError(
                f"initial_pheromone must be at least {self.pheromone_floor}, "
                f"got {self.initial_pheromone}"
            )
        if self.max_iterations < 0 or self.max_tours < 0:
            raise ConfigurationError("Iteration and tour budgets must be non-negative")
        if self.max_iterations == 0 and self.max_tours == 0:
            raise ConfigurationError("At least one of max_iterations or max_tours must be set")
        if self.start_city is not None and self.start_city < 0:
            raise ConfigurationError(f"start_city must be non-negative, got {self.start_city}")

    @classmethod
    def for_experiment(cls, seed: int = 0, **overrides) -> "ACOConfig":
        """Create a reproducible, iteration-bounded configuration.

        Uses the classic alpha=1, beta=2, rho=0.1 setting with 10 ants
        for 50 iterations. Keyword overrides replace individual fields.
        """
        params = dict(
            n_ants=10,
            alpha=1.0,
            beta=2.0,
            rho=0.1,
            max_iterations=50,
            max_tours=0,
            seed=seed,
        )
        params.update(overrides)
        return cls(**params)


@dataclass
class PSOConfig:
    """Configuration for the particle swarm engine.

    Trust coefficients are independent probabilities of applying a swap
    operator from each influence; they do not need to sum to 1.

    Attributes:
        n_particles: Swarm size
        self_trust: Weight of the particle's previous velocity
        past_trust: Pull toward the particle's personal best
        global_trust: Pull toward the swarm's global best
        max_iterations: Iteration budget
        target_length: Stop as soon as the best tour is this short (None = disabled)
        seed: RNG seed (None = seeded from wall-clock time)
    """

    n_particles: int = 20
    self_trust: float = 0.2
    past_trust: float = 0.1
    global_trust: float = 0.7
    max_iterations: int = 200
    target_length: Optional[float] = None
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate configuration."""
        if self.n_particles < 1:
            raise ConfigurationError(f"n_particles must be positive, got {self.n_particles}")
        for name in ("self_trust", "past_trust", "global_trust"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise ConfigurationError(f"{name} must be in [0, 1], got {value}")
        if self.max_iterations < 1:
            raise ConfigurationError(f"max_iterations must be positive, got {self.max_iterations}")
        if self.target_length is not None and self.target_length < 0:
            raise ConfigurationError(f"target_length must be non-negative, got {self.target_length}")

    @classmethod
    def for_plant_survey(cls, seed: Optional[int] = None) -> "PSOConfig":
        """Create the configuration used by the plant survey behavior.

        20 particles, trusts 0.2/0.1/0.7, accepting tours of 86.63 or less.
        """
        return cls(
            n_particles=20,
            self_trust=0.2,
            past_trust=0.1,
            global_trust=0.7,
            target_length=86.63,
            seed=seed,
        )
