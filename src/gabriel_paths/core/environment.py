"""
Point cloud representation for proximity-graph path planning.

This module defines the PointCloud class which encapsulates the drawing
region and generates the random node sets the graph builder works on.
"""

import logging
from typing import List, Optional, Tuple

import numpy as np

from .node import Node

logger = logging.getLogger(__name__)


class PointCloud:
    """
    Represents the region random points are scattered in.

    Points are drawn with integer coordinates, kept away from the edges by a
    margin so node markers stay fully visible when rendered.

    Attributes:
        map_size (Tuple[int, int]): (width, height) of the region
        min_margin (int): Gap kept from the left and bottom edges
        max_margin (int): Gap kept from the right and top edges
        bounds (Tuple[int, int, int, int]): (x_min, y_min, x_max, y_max), max exclusive
        nodes (List[Node]): Nodes from the last call to generate()
    """

    def __init__(self,
                 map_size: Tuple[int, int],
                 min_margin: int = 10,
                 max_margin: int = 20):
        """
        Initialize the point cloud region.

        Args:
            map_size: (width, height) of the region
            min_margin: Gap from the left/bottom edges (default: 10)
            max_margin: Gap from the right/top edges (default: 20)

        Raises:
            ValueError: If the margins leave no room for points

        Example:
            >>> cloud = PointCloud(map_size=(800, 600))
            >>> nodes = cloud.generate(250, seed=7)
        """
        self.map_size = (int(map_size[0]), int(map_size[1]))
        self.min_margin = int(min_margin)
        self.max_margin = int(max_margin)

        self.bounds = (self.min_margin,
                       self.min_margin,
                       self.map_size[0] - self.max_margin,
                       self.map_size[1] - self.max_margin)

        if self.bounds[2] <= self.bounds[0] or self.bounds[3] <= self.bounds[1]:
            raise ValueError(f"Margins {self.min_margin}/{self.max_margin} leave no room "
                             f"inside map of size {self.map_size}")

        self.nodes: List[Node] = []

    @property
    def capacity(self) -> int:
        """Number of distinct integer positions inside the bounds."""
        x_min, y_min, x_max, y_max = self.bounds
        return (x_max - x_min) * (y_max - y_min)

    def is_point_in_bounds(self, point: Tuple[float, float]) -> bool:
        """
        Check if a point is within the generation bounds.

        Args:
            point: (x, y) coordinates

        Returns:
            True if point is within bounds, False otherwise
        """
        x, y = point
        x_min, y_min, x_max, y_max = self.bounds
        return x_min <= x < x_max and y_min <= y < y_max

    def generate(self, num_points: int, seed: Optional[int] = None) -> List[Node]:
        """
        Scatter distinct random points and wrap them in nodes.

        Positions that repeat an earlier draw are redrawn, so no two nodes
        coincide. Node ids run from 0 to num_points - 1 in draw order.

        Args:
            num_points: Number of nodes to create
            seed: Seed for the random generator (None for fresh entropy)

        Returns:
            List of nodes with empty neighbor lists

        Raises:
            ValueError: If num_points is negative or exceeds the capacity
        """
        if num_points < 0:
            raise ValueError(f"num_points must be non-negative, got {num_points}")
        if num_points > self.capacity:
            raise ValueError(f"Cannot place {num_points} distinct points in a region "
                             f"holding {self.capacity}")

        rng = np.random.default_rng(seed)
        x_min, y_min, x_max, y_max = self.bounds

        taken = set()
        nodes = []
        while len(nodes) < num_points:
            x = int(rng.integers(x_min, x_max))
            y = int(rng.integers(y_min, y_max))
            if (x, y) in taken:
                continue
            taken.add((x, y))
            nodes.append(Node(len(nodes), x, y))

        self.nodes = nodes
        logger.debug("Generated %d points in bounds %s", num_points, self.bounds)
        return nodes

    def random_pair(self, seed: Optional[int] = None) -> Tuple[int, int]:
        """
        Pick a random (start, goal) id pair from the generated nodes.

        The two ids may be equal.

        Raises:
            ValueError: If no nodes have been generated
        """
        if not self.nodes:
            raise ValueError("No nodes generated. Run generate() first.")

        rng = np.random.default_rng(seed)
        start_idx, goal_idx = rng.integers(0, len(self.nodes), size=2)
        return self.nodes[int(start_idx)].id, self.nodes[int(goal_idx)].id

    def __repr__(self) -> str:
        """String representation of the point cloud."""
        return (f"PointCloud(map_size={self.map_size}, "
                f"points={len(self.nodes)})")
