"""Unit tests for the tour planning facade.

Run with: pytest tests/unit/test_planner.py -v
"""

import logging
import pytest

from swarmopt import (
    ACOConfig,
    PSOConfig,
    ConfigurationError,
    TourResult,
    plan_tour,
)


class TestPlanTour:
    """Tests for plan_tour."""

    def test_aco_plan(self, unit_square):
        result = plan_tour(unit_square, method="aco", config=ACOConfig.for_experiment(seed=1))

        assert isinstance(result, TourResult)
        assert result.method == "aco"
        assert sorted(result.best_tour) == [0, 1, 2, 3]
        assert result.best_length <= 4.05

    def test_pso_plan(self, unit_square):
        result = plan_tour(unit_square, method="PSO", config=PSOConfig(max_iterations=50, seed=4))

        assert result.method == "pso"
        assert sorted(result.best_tour) == [0, 1, 2, 3]
        assert result.accepted(4.05)

    def test_plan_from_instance_file(self, square_instance_path):
        result = plan_tour(square_instance_path, config=ACOConfig.for_experiment(seed=2))
        assert result.best_length == pytest.approx(4.0)

    def test_unknown_method(self, unit_square):
        with pytest.raises(ConfigurationError):
            plan_tour(unit_square, method="genetic")

    def test_mismatched_config(self, unit_square):
        with pytest.raises(ConfigurationError):
            plan_tour(unit_square, method="aco", config=PSOConfig(seed=1))
        with pytest.raises(ConfigurationError):
            plan_tour(unit_square, method="pso", config=ACOConfig.for_experiment())

    def test_rejects_single_target(self):
        with pytest.raises(ConfigurationError):
            plan_tour([(0.0, 0.0)], method="pso", config=PSOConfig(seed=1))

    def test_logs_rendered_tour(self, unit_square, caplog):
        with caplog.at_level(logging.INFO, logger="swarmopt"):
            result = plan_tour(unit_square, config=ACOConfig.for_experiment(seed=3, max_iterations=5))

        assert f"Shortest path: {result.to_string()}" in caplog.text


class TestTourResult:
    """Tests for TourResult."""

    def test_accepted_threshold(self):
        result = TourResult(best_tour=[0, 1, 2], best_length=86.0, iterations=1, evaluations=20)
        assert result.accepted(86.63)
        assert result.accepted(86.0)
        assert not result.accepted(85.9)

    def test_to_string(self):
        result = TourResult(best_tour=[1, 0, 2], best_length=3.0, iterations=1, evaluations=1)
        assert result.to_string() == "1 -> 0 -> 2 -> 1"
