"""
Geometric utility functions for proximity graphs.

This module provides the distance measures and the circle-containment
predicate that the Gabriel graph builder and the A* heuristics rely on.
"""

import math
from typing import Tuple, Union

from ..core.exceptions import DegenerateSegmentError

Number = Union[int, float]
Coordinate = Tuple[Number, Number]


def distance(p1: Coordinate, p2: Coordinate) -> float:
    """
    Euclidean distance between two points.

    Args:
        p1: First point (x, y)
        p2: Second point (x, y)

    Returns:
        Straight-line distance, 0.0 for coincident points

    Example:
        >>> distance((0, 0), (3, 4))
        5.0
    """
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def manhattan_distance(p1: Coordinate, p2: Coordinate) -> float:
    """
    Manhattan (taxicab) distance between two points.

    Example:
        >>> manhattan_distance((0, 0), (3, 4))
        7.0
    """
    return float(abs(p2[0] - p1[0]) + abs(p2[1] - p1[1]))


def circle_contains(a: Coordinate, b: Coordinate, c: Coordinate) -> bool:
    """
    Test if point c lies inside or on the circle with diameter AB.

    The circle is centered on the midpoint of segment AB with radius
    |AB| / 2. The center is reached by walking half the segment length along
    the unit direction from A to B.

    Args:
        a: First endpoint of the diameter (x, y)
        b: Second endpoint of the diameter (x, y)
        c: Point to test (x, y)

    Returns:
        True if c is within or on the circle, False otherwise

    Raises:
        DegenerateSegmentError: If a and b coincide (no direction to walk)

    Examples:
        >>> circle_contains((0, 0), (10, 0), (5, 5))
        True   # on the boundary
        >>> circle_contains((0, 0), (10, 0), (5, 6))
        False
    """
    length = distance(a, b)
    if length == 0:
        raise DegenerateSegmentError(a, b)

    radius = length / 2
    dx = b[0] - a[0]
    dy = b[1] - a[1]

    mid_x = a[0] + (dx / length) * radius
    mid_y = a[1] + (dy / length) * radius

    return distance((mid_x, mid_y), c) <= radius
