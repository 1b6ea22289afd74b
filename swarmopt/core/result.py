"""Optimization result record shared by both engines."""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from ..tsp.distance import format_tour


@dataclass
class TourResult:
    """Best tour found by an engine run.

    Attributes:
        best_tour: City indices in visiting order (closed implicitly)
        best_length: Closed tour length
        iterations: Iterations performed
        evaluations: Tours constructed (ACO) or particle evaluations (PSO)
        history: (iteration, best_length) at every improvement
        seed: Seed the engine RNG was created with
        method: "aco" or "pso"
    """
    best_tour: List[int]
    best_length: float
    iterations: int
    evaluations: int
    history: List[Tuple[int, float]] = field(default_factory=list)
    seed: Optional[int] = None
    method: str = ""

    def accepted(self, target_length: float) -> bool:
        """Check whether the tour is short enough for the caller."""
        return self.best_length <= target_length

    def to_string(self) -> str:
        return format_tour(self.best_tour)
