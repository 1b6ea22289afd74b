"""Shared pytest configuration and fixtures for swarmopt tests.

This module provides:
- Custom markers for test categorization
- Shared target sets (unit square, plant grid, degenerate sets)
"""

import logging
import pytest
from pathlib import Path

logger = logging.getLogger(__name__)

# Project root for data files
PROJECT_ROOT = Path(__file__).parent.parent
DATA_DIR = PROJECT_ROOT / "data"


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Pure Python tests, fast")
    config.addinivalue_line("markers", "slow: Convergence runs that take longer")


@pytest.fixture
def unit_square():
    """Corners of the unit square, optimal closed tour length 4.0."""
    return [(0.0, 0.0), (0.0, 1.0), (1.0, 1.0), (1.0, 0.0)]


@pytest.fixture
def plant_targets():
    """The 4x2 plant grid walked by the survey behavior."""
    from swarmopt.tsp import PlantGridConfig, plant_target_grid
    return plant_target_grid(PlantGridConfig(
        center=(0.0, 0.0),
        distances=(1.0, 1.0),
        layout=(4, 2),
        quantity=8,
    ))


@pytest.fixture
def scattered_targets():
    """Ten irregular targets."""
    return [
        (0.0, 0.0), (3.0, 1.0), (6.0, 0.5), (7.5, 3.0), (6.5, 6.0),
        (4.0, 7.0), (1.5, 6.5), (0.5, 4.0), (3.5, 3.5), (5.0, 2.5),
    ]


@pytest.fixture
def identical_targets():
    """Five targets at the same spot."""
    return [(2.0, 2.0)] * 5


@pytest.fixture
def square_instance_path() -> Path:
    """TSPLIB file holding the unit square."""
    return DATA_DIR / "square4.tsp"


def pytest_collection_modifyitems(config, items):
    """Auto-add markers based on test location."""
    for item in items:
        # Auto-mark tests in tests/unit/ with @pytest.mark.unit
        if "tests/unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
