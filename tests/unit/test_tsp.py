"""Unit tests for the distance model, TSPLIB loading and target layouts.

Run with: pytest tests/unit/test_tsp.py -v
"""

import math
import pytest

from swarmopt.core import ConfigurationError
from swarmopt.tsp import (
    Coordinate,
    DistanceModel,
    PlantGridConfig,
    as_distance_model,
    format_tour,
    load_tsplib,
    parse_tsplib,
    plant_target_grid,
)


class TestCoordinate:
    """Tests for Coordinate."""

    def test_from_3d_drops_vertical_axis(self):
        """3D positions keep x and z on the ground plane."""
        c = Coordinate.from_3d(1.0, 5.0, -2.0)
        assert c == Coordinate(1.0, -2.0)

    def test_immutable(self):
        """Coordinates cannot be changed once recorded."""
        c = Coordinate(1.0, 2.0)
        with pytest.raises(AttributeError):
            c.x = 3.0


class TestDistanceModel:
    """Tests for DistanceModel."""

    def test_symmetric_non_negative(self, scattered_targets):
        """Distance matrix should be symmetric with zero diagonal."""
        model = DistanceModel(scattered_targets)
        for i in range(model.n):
            assert model.distance(i, i) == 0.0
            for j in range(model.n):
                assert model.distance(i, j) >= 0.0
                assert model.distance(i, j) == pytest.approx(model.distance(j, i))

    def test_euclidean_distance(self):
        """3-4-5 triangle sides."""
        model = DistanceModel([(0, 0), (3, 0), (3, 4)])
        assert model.distance(0, 1) == pytest.approx(3.0)
        assert model.distance(1, 2) == pytest.approx(4.0)
        assert model.distance(0, 2) == pytest.approx(5.0)

    def test_tour_length_closes_loop(self, unit_square):
        """Tour length includes the edge back to the start."""
        model = DistanceModel(unit_square)
        assert model.tour_length([0, 1, 2, 3]) == pytest.approx(4.0)
        assert model.tour_length([0, 2, 1, 3]) == pytest.approx(2.0 + 2.0 * math.sqrt(2.0))

    def test_tour_length_rotation_invariant(self, scattered_targets):
        """Starting city does not change the closed length."""
        model = DistanceModel(scattered_targets)
        tour = [3, 7, 1, 0, 9, 4, 2, 8, 6, 5]
        expected = model.tour_length(tour)
        for k in range(len(tour)):
            rotated = tour[k:] + tour[:k]
            assert model.tour_length(rotated) == pytest.approx(expected)

    def test_tour_length_reversal_invariant(self, scattered_targets):
        """Both directions around the loop have the same length."""
        model = DistanceModel(scattered_targets)
        tour = [3, 7, 1, 0, 9, 4, 2, 8, 6, 5]
        assert model.tour_length(list(reversed(tour))) == pytest.approx(model.tour_length(tour))

    def test_two_targets(self):
        """Two targets give an out-and-back tour."""
        model = DistanceModel([(0, 0), (0, 2.5)])
        assert model.tour_length([0, 1]) == pytest.approx(5.0)

    def test_identical_targets_zero_length(self, identical_targets):
        """Coincident targets are legal and have zero distance."""
        model = DistanceModel(identical_targets)
        assert model.tour_length([0, 1, 2, 3, 4]) == 0.0

    def test_rejects_fewer_than_two(self):
        """Less than two targets is a configuration error."""
        with pytest.raises(ConfigurationError):
            DistanceModel([(0, 0)])
        with pytest.raises(ConfigurationError):
            DistanceModel([])

    def test_empty_tour_rejected(self, unit_square):
        """An empty tour has no length."""
        with pytest.raises(ValueError):
            DistanceModel(unit_square).tour_length([])

    @pytest.mark.parametrize("tour", [[-1, 0], [0, 1, 4]])
    def test_out_of_range_city_rejected(self, unit_square, tour):
        """Negative or too-large ids raise instead of wrapping."""
        with pytest.raises(ValueError):
            DistanceModel(unit_square).tour_length(tour)

    def test_is_permutation(self, unit_square):
        """Permutation check catches duplicates and missing cities."""
        model = DistanceModel(unit_square)
        assert model.is_permutation([2, 0, 3, 1])
        assert not model.is_permutation([0, 1, 1, 3])
        assert not model.is_permutation([0, 1, 2])

    def test_matrix_read_only(self, unit_square):
        """Distances cannot be modified through the matrix view."""
        model = DistanceModel(unit_square)
        with pytest.raises(ValueError):
            model.matrix[0, 1] = 10.0

    def test_accepts_coordinates(self):
        """Coordinate objects and plain pairs both work."""
        model = DistanceModel([Coordinate(0, 0), (1, 0)])
        assert model.n == 2
        assert len(model) == 2


class TestFormatTour:
    """Tests for tour rendering."""

    def test_closed_rendering(self):
        assert format_tour([0, 3, 1, 2]) == "0 -> 3 -> 1 -> 2 -> 0"

    def test_empty(self):
        assert format_tour([]) == ""


class TestTSPLIB:
    """Tests for TSPLIB loading."""

    def test_load_square(self, square_instance_path):
        """Unit square instance loads in node order."""
        coords = load_tsplib(square_instance_path)
        assert coords == [
            Coordinate(0.0, 0.0),
            Coordinate(0.0, 1.0),
            Coordinate(1.0, 1.0),
            Coordinate(1.0, 0.0),
        ]

    def test_source_from_path(self, square_instance_path):
        """A file path resolves to a distance model."""
        model = as_distance_model(str(square_instance_path))
        assert model.n == 4
        assert model.tour_length([0, 1, 2, 3]) == pytest.approx(4.0)

    def test_missing_section(self):
        with pytest.raises(ConfigurationError):
            parse_tsplib("NAME : x\nTYPE : TSP\nEOF\n")

    def test_malformed_line(self):
        with pytest.raises(ConfigurationError):
            parse_tsplib("NODE_COORD_SECTION\n1 0.0\nEOF\n")

    def test_dimension_mismatch(self):
        with pytest.raises(ConfigurationError):
            parse_tsplib("DIMENSION : 3\nNODE_COORD_SECTION\n1 0 0\n2 1 1\nEOF\n")

    def test_malformed_dimension(self):
        """A non-numeric DIMENSION is a configuration error."""
        with pytest.raises(ConfigurationError):
            parse_tsplib("DIMENSION : four\nNODE_COORD_SECTION\n1 0 0\n2 1 1\nEOF\n")

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError):
            load_tsplib(tmp_path / "nope.tsp")

    def test_nodes_sorted_by_id(self):
        """Coordinates are indexed by node id, not file order."""
        coords = parse_tsplib("NODE_COORD_SECTION\n2 5 5\n1 1 1\n")
        assert coords == [Coordinate(1.0, 1.0), Coordinate(5.0, 5.0)]


class TestPlantTargetGrid:
    """Tests for plant target localisation."""

    def test_back_and_forth_order(self, plant_targets):
        """First row runs +x, second row runs back."""
        xs = [t.x for t in plant_targets]
        zs = [t.y for t in plant_targets]
        assert xs == pytest.approx([-1.75, -0.75, 0.25, 1.25, 1.25, 0.25, -0.75, -1.75])
        assert zs == pytest.approx([-0.75] * 4 + [0.25] * 4)

    def test_walking_order_is_perimeter(self, plant_targets):
        """On a two-row grid the walking order is the 8.0 perimeter."""
        model = DistanceModel(plant_targets)
        assert model.tour_length(list(range(8))) == pytest.approx(8.0)

    def test_partial_quantity(self):
        """Quantity truncates the walk."""
        targets = plant_target_grid(PlantGridConfig(layout=(3, 3), quantity=5))
        assert len(targets) == 5

    def test_invalid_quantity(self):
        with pytest.raises(ConfigurationError):
            PlantGridConfig(layout=(2, 2), quantity=5)
        with pytest.raises(ConfigurationError):
            PlantGridConfig(layout=(0, 2), quantity=1)
