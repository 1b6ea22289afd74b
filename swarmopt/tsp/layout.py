"""Target layouts for survey missions.

Generates the plant target positions a survey drone is expected to visit,
walked in boustrophedon (back-and-forth) order like a lawnmower pass.
"""

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..core.errors import ConfigurationError
from .distance import Coordinate

logger = logging.getLogger(__name__)


@dataclass
class PlantGridConfig:
    """Configuration for a rectangular plant target grid.

    Attributes:
        center: (x, z) center of the planted area
        distances: (dx, dz) spacing between neighbouring plants
        layout: (columns, rows) of the grid
        quantity: Number of plants actually planted (row-major, back-and-forth)
    """
    center: Tuple[float, float] = (0.0, 0.0)
    distances: Tuple[float, float] = (1.0, 1.0)
    layout: Tuple[int, int] = (4, 2)
    quantity: int = 8

    def __post_init__(self):
        """Validate configuration."""
        columns, rows = self.layout
        if columns < 1 or rows < 1:
            raise ConfigurationError(f"Grid layout must be at least 1x1, got {self.layout}")
        if not 0 < self.quantity <= columns * rows:
            raise ConfigurationError(
                f"quantity must be in [1, {columns * rows}], got {self.quantity}"
            )


def plant_target_grid(config: PlantGridConfig) -> List[Coordinate]:
    """Compute plant target locations.

    The first row is walked in +x, then one step in +z, the next row in -x,
    and so on. The grid is centred on ``config.center``; its extent is
    ``columns * dx - 0.5`` by ``rows * dz - 0.5``.

    Args:
        config: Grid configuration

    Returns:
        Target coordinates in walking order
    """
    columns, rows = config.layout
    dx, dz = config.distances
    width = columns * dx - 0.5
    height = rows * dz - 0.5
    x0 = config.center[0] - width / 2.0
    z0 = config.center[1] - height / 2.0

    targets = []
    for t in range(config.quantity):
        row = t // columns
        col = t % columns
        if row % 2 == 1:
            # Odd rows run back toward -x
            col = columns - 1 - col
        targets.append(Coordinate(x0 + col * dx, z0 + row * dz))

    logger.debug(f"Computed {len(targets)} plant targets on a {columns}x{rows} grid")
    return targets
