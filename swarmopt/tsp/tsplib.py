"""TSPLIB instance loading.

Reads the coordinate part of a TSPLIB ``.tsp`` file::

    NAME : square4
    TYPE : TSP
    DIMENSION : 4
    EDGE_WEIGHT_TYPE : EUC_2D
    NODE_COORD_SECTION
    1 0.0 0.0
    2 0.0 1.0
    ...
    EOF
"""

import logging
from pathlib import Path
from typing import Dict, List, Union

from ..core.errors import ConfigurationError
from .distance import Coordinate

logger = logging.getLogger(__name__)


def parse_tsplib(text: str) -> List[Coordinate]:
    """Parse TSPLIB text into coordinates ordered by node id.

    Args:
        text: Contents of a ``.tsp`` file

    Returns:
        Coordinates, index 0 being TSPLIB node 1

    Raises:
        ConfigurationError: On a missing coordinate section or malformed line
    """
    header: Dict[str, str] = {}
    nodes: Dict[int, Coordinate] = {}
    in_coords = False

    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line == "EOF":
            break
        if line.startswith("NODE_COORD_SECTION"):
            in_coords = True
            continue

        if not in_coords:
            if ":" in line:
                key, value = line.split(":", 1)
                header[key.strip().upper()] = value.strip()
            continue

        parts = line.split()
        if len(parts) < 3:
            raise ConfigurationError(f"Malformed coordinate line {line_no}: {raw!r}")
        try:
            node_id = int(parts[0])
            nodes[node_id] = Coordinate(float(parts[1]), float(parts[2]))
        except ValueError as e:
            raise ConfigurationError(f"Malformed coordinate line {line_no}: {raw!r}") from e

    if not in_coords:
        raise ConfigurationError("TSPLIB data has no NODE_COORD_SECTION")

    dimension = header.get("DIMENSION")
    if dimension is not None:
        try:
            expected = int(dimension)
        except ValueError as e:
            raise ConfigurationError(f"Malformed DIMENSION header: {dimension!r}") from e
        if expected != len(nodes):
            raise ConfigurationError(
                f"DIMENSION is {expected} but {len(nodes)} coordinates were read"
            )

    return [nodes[k] for k in sorted(nodes)]


def load_tsplib(path: Union[str, Path]) -> List[Coordinate]:
    """Load coordinates from a TSPLIB file."""
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Instance file not found: {path}")
    coordinates = parse_tsplib(path.read_text(encoding="utf-8"))
    logger.info(f"Loaded {len(coordinates)} targets from {path.name}")
    return coordinates
