"""Unit tests for the geometry primitives."""

import math

import pytest

from gabriel_paths.core.exceptions import DegenerateSegmentError
from gabriel_paths.core.node import Point
from gabriel_paths.utils.geometry import circle_contains, distance, manhattan_distance


class TestDistance:
    """Test Euclidean and Manhattan distances."""

    def test_pythagorean_triple(self):
        assert distance((0, 0), (3, 4)) == 5.0

    def test_coincident_points(self):
        assert distance((7, 7), (7, 7)) == 0.0

    def test_symmetric_and_non_negative(self):
        a, b = Point(-3, 12), Point(8, -1)
        assert distance(a, b) == distance(b, a)
        assert distance(a, b) > 0

    def test_float_coordinates(self):
        assert distance((0.5, 0.5), (1.5, 1.5)) == pytest.approx(math.sqrt(2))

    def test_manhattan(self):
        assert manhattan_distance((0, 0), (3, 4)) == 7.0
        assert manhattan_distance((3, 4), (0, 0)) == 7.0
        assert manhattan_distance((2, 2), (2, 2)) == 0.0


class TestCircleContains:
    """Test the diameter-circle containment predicate."""

    def test_center_is_inside(self):
        assert circle_contains((0, 0), (10, 0), (5, 0))

    def test_point_near_center_is_inside(self):
        assert circle_contains((0, 0), (10, 0), (5, 1))

    def test_point_outside(self):
        assert not circle_contains((0, 0), (10, 0), (5, 6))
        assert not circle_contains((0, 0), (10, 0), (20, 0))

    def test_endpoint_lies_on_circle(self):
        """The diameter endpoints are on the boundary, which counts as inside."""
        assert circle_contains((0, 0), (10, 0), (0, 0))
        assert circle_contains((0, 0), (10, 0), (10, 0))

    def test_order_of_diameter_endpoints_does_not_matter(self):
        assert circle_contains((10, 0), (0, 0), (5, 1))
        assert not circle_contains((10, 0), (0, 0), (5, 6))

    def test_diagonal_segment(self):
        assert circle_contains((0, 0), (10, 10), (6, 4))
        assert not circle_contains((0, 0), (10, 10), (12, 0))

    def test_degenerate_segment_raises(self):
        with pytest.raises(DegenerateSegmentError):
            circle_contains((3, 3), (3, 3), (4, 4))

    def test_degenerate_segment_is_value_error(self):
        with pytest.raises(ValueError, match="coincide"):
            circle_contains((1.5, 2), (1.5, 2), (0, 0))
