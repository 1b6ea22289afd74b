"""Resolution of target-set sources into a distance model."""

from pathlib import Path
from typing import Iterable, Union

from .distance import CoordinateLike, DistanceModel
from .tsplib import load_tsplib

TargetSource = Union[DistanceModel, str, Path, Iterable[CoordinateLike]]


def as_distance_model(source: TargetSource) -> DistanceModel:
    """Build a DistanceModel from a model, a TSPLIB path or coordinates."""
    if isinstance(source, DistanceModel):
        return source
    if isinstance(source, (str, Path)):
        return DistanceModel(load_tsplib(source))
    return DistanceModel(source)
