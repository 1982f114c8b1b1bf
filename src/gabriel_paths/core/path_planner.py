"""
Abstract base class for graph path planners.

This module defines the common interface a planner over a point cloud
implements: build the graph, plan between two node ids, report metrics and
draw the result.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

import numpy as np

from .environment import PointCloud
from .exceptions import NodeNotFoundError
from .node import Node


class PathPlanner(ABC):
    """
    Abstract base class for path planning over a point cloud.

    Attributes:
        environment (PointCloud): The point cloud holding the node set
        config (Dict[str, Any]): Algorithm-specific configuration parameters
        path (Optional[List[Node]]): Computed path, goal first and start last
        planning_time (float): Time taken by the last search (seconds)
        build_time (float): Time taken by the last graph construction (seconds)
    """

    def __init__(self, environment: PointCloud, config: Dict[str, Any]):
        """
        Initialize the path planner.

        Args:
            environment: PointCloud whose nodes are planned over
            config: Dictionary of algorithm-specific parameters loaded from YAML
        """
        self.environment = environment
        self.config = config
        self.path: Optional[List[Node]] = None
        self.planning_time: float = 0.0
        self.build_time: float = 0.0
        self._initialize_algorithm()

    @abstractmethod
    def _initialize_algorithm(self) -> None:
        """
        Initialize algorithm-specific data structures.

        Called during __init__. Subclasses must override this method.
        """

    @abstractmethod
    def build_graph(self) -> None:
        """Assign neighbors to every node of the environment."""

    @abstractmethod
    def plan(self, start_id: int, goal_id: int) -> Optional[List[Node]]:
        """
        Compute a path between two nodes of the environment.

        Args:
            start_id: Id of the start node
            goal_id: Id of the goal node

        Returns:
            List of nodes from goal back to start if a path exists,
            None otherwise
        """

    @abstractmethod
    def get_metrics(self) -> Dict[str, Any]:
        """
        Get performance metrics from the last planning run.

        Returns:
            Dictionary containing at least path_length, planning_time and
            build_time
        """

    @abstractmethod
    def visualize(self, ax, **kwargs) -> None:
        """
        Draw the graph and planning result on a matplotlib axis.

        Args:
            ax: Matplotlib axis object to draw on
            **kwargs: Additional visualization parameters
        """

    def get_node(self, node_id: int, role: str = "node") -> Node:
        """
        Look up a node of the environment by id.

        Raises:
            NodeNotFoundError: If no node carries that id
        """
        for node in self.environment.nodes:
            if node.id == node_id:
                return node
        raise NodeNotFoundError(node_id, role)

    def get_path_length(self) -> float:
        """
        Calculate the total Euclidean length of the computed path.

        Returns:
            Path length in environment units
            0.0 if no path exists or the path is a single node
        """
        if self.path is None or len(self.path) < 2:
            return 0.0

        coords = np.array([node.position for node in self.path], dtype=float)
        return float(np.sum(np.linalg.norm(np.diff(coords, axis=0), axis=1)))

    def __repr__(self) -> str:
        """String representation of the planner."""
        return f"{self.__class__.__name__}(config={self.config})"

    def __str__(self) -> str:
        """Human-readable string representation."""
        status = "with path" if self.path else "no path"
        return f"{self.__class__.__name__} ({status})"
