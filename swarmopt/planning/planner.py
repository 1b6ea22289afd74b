"""Tour planning facade for robot behaviors.

Behaviors hand over discovered target coordinates and get back an ordered
visiting sequence, without touching engine internals.
"""

import logging
from typing import Optional, Union

from ..aco.colony import AntColony
from ..core.config import ACOConfig, PSOConfig
from ..core.errors import ConfigurationError
from ..core.result import TourResult
from ..pso.swarm import ParticleSwarm
from ..tsp.source import TargetSource, as_distance_model

logger = logging.getLogger(__name__)

METHODS = ("aco", "pso")


def plan_tour(
    targets: TargetSource,
    method: str = "aco",
    config: Optional[Union[ACOConfig, PSOConfig]] = None,
) -> TourResult:
    """Plan a closed visiting tour over the targets.

    Args:
        targets: DistanceModel, TSPLIB file path or coordinate sequence
        method: "aco" (ant colony) or "pso" (particle swarm)
        config: Engine configuration matching the method (None = defaults)

    Returns:
        TourResult with the best tour found

    Raises:
        ConfigurationError: On an unknown method, a mismatched config or an
            invalid target set
    """
    method = method.lower()
    if method not in METHODS:
        raise ConfigurationError(f"Unknown method '{method}', expected one of {METHODS}")

    model = as_distance_model(targets)

    if method == "aco":
        if config is not None and not isinstance(config, ACOConfig):
            raise ConfigurationError("ACO planning requires an ACOConfig")
        engine = AntColony(model, config)
        engine.optimize()
    else:
        if config is not None and not isinstance(config, PSOConfig):
            raise ConfigurationError("PSO planning requires a PSOConfig")
        engine = ParticleSwarm(model, config)
        engine.solve()

    result = engine.result()
    logger.info(f"{method.upper()} tour distance: {result.best_length:.4f}")
    logger.info(f"Shortest path: {result.to_string()}")
    return result
