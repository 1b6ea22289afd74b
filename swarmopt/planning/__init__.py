"""Tour planning entry points."""

from ..core.result import TourResult
from .planner import METHODS, plan_tour

__all__ = [
    "TourResult",
    "METHODS",
    "plan_tour",
]
