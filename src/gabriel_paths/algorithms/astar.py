"""
A* pathfinding algorithm implementation.

A* is an informed search algorithm that uses a heuristic to efficiently find
short paths in a graph. The engine here works on any node type exposing an
``id``, a ``position`` and a ``neighbors`` list, and keeps all of its
bookkeeping in a per-search record table keyed by node id.
"""

import logging
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from ..core.exceptions import (DuplicateNodeIdError, GraphNotBuiltError,
                               NodeNotFoundError, SearchLimitExceeded)
from ..core.node import PathNode, SearchRecord
from ..core.path_planner import PathPlanner
from ..utils.geometry import Coordinate, distance, manhattan_distance
from ..utils.graph_builder import build_gabriel_graph, graph_edges
from ..utils.visualization import (draw_endpoints, draw_explored, draw_graph, draw_path,
                                   setup_plot_limits)

logger = logging.getLogger(__name__)

DEFAULT_INITIAL_G = 10.0


class Heuristic(Enum):
    """Distance measure used both as heuristic and as edge cost."""

    EUCLIDEAN = 'euclidean'
    MANHATTAN = 'manhattan'

    def estimate(self, p1: Coordinate, p2: Coordinate) -> float:
        if self is Heuristic.MANHATTAN:
            return manhattan_distance(p1, p2)
        return distance(p1, p2)

    @classmethod
    def from_name(cls, name: str) -> "Heuristic":
        """
        Parse a heuristic from its configuration name.

        Raises:
            ValueError: If the name is not a known heuristic

        Example:
            >>> Heuristic.from_name('Manhattan')
            <Heuristic.MANHATTAN: 'manhattan'>
        """
        try:
            return cls(name.lower())
        except ValueError:
            available = ', '.join(h.value for h in cls)
            raise ValueError(f"Unknown heuristic '{name}'. Available: {available}") from None


@dataclass
class SearchResult:
    """Result of an A* search."""
    found: bool
    path: Optional[List[PathNode]] = None
    cost: float = 0.0
    iterations: int = 0
    nodes_expanded: int = 0
    elapsed: float = 0.0
    records: Dict[int, SearchRecord] = field(default_factory=dict)

    @property
    def path_ids(self) -> Optional[List[int]]:
        if self.path is None:
            return None
        return [node.id for node in self.path]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "found": self.found,
            "path": self.path_ids,
            "cost": self.cost,
            "iterations": self.iterations,
            "nodes_expanded": self.nodes_expanded,
            "elapsed": self.elapsed,
        }


class AStarSearch:
    """
    A* search over a proximity graph.

    The open list is a plain list scanned linearly for the lowest f-score;
    among equal f-scores the node inserted first wins. Closed nodes are final
    and are not reopened even if a cheaper route to them shows up later.

    Attributes:
        heuristic (Heuristic): Distance used for h-scores and edge costs
        initial_g (float): g-score every node starts a search with
        max_iterations (Optional[int]): Abort the search after this many
            open-list selections (None for no limit)
    """

    def __init__(self,
                 heuristic: Heuristic = Heuristic.EUCLIDEAN,
                 initial_g: float = DEFAULT_INITIAL_G,
                 max_iterations: Optional[int] = None):
        self.heuristic = heuristic
        self.initial_g = initial_g
        self.max_iterations = max_iterations

    def search(self, start: PathNode, target: PathNode,
               nodes: Sequence[PathNode]) -> SearchResult:
        """
        Find a path from start to target.

        Args:
            start: Node the search starts from
            target: Node to reach
            nodes: Every node of the graph, start and target included

        Returns:
            SearchResult whose path runs from target back to start, or with
            ``found=False`` when the target cannot be reached

        Raises:
            DuplicateNodeIdError: If two nodes share an id
            NodeNotFoundError: If start, target or a reachable neighbor is
                not part of ``nodes``
            SearchLimitExceeded: If max_iterations is exceeded
        """
        start_time = time.time()
        index = self._index_nodes(nodes)

        if start.id not in index:
            raise NodeNotFoundError(start.id, "start")
        if target.id not in index:
            raise NodeNotFoundError(target.id, "target")

        target_position = index[target.id].position
        records = {
            node_id: SearchRecord(g=self.initial_g,
                                  h=self.heuristic.estimate(node.position, target_position))
            for node_id, node in index.items()
        }

        start_record = records[start.id]
        start_record.checked = True
        open_list = [start.id]

        iterations = 0
        expanded = 0

        while open_list:
            if self.max_iterations is not None and iterations >= self.max_iterations:
                raise SearchLimitExceeded(self.max_iterations)
            iterations += 1

            current_id = self._lowest_f(open_list, records)
            current = index[current_id]
            current_record = records[current_id]

            if current_id == target.id:
                path = self._traceback(target.id, index, records)
                result = SearchResult(
                    found=True,
                    path=path,
                    cost=current_record.g - start_record.g,
                    iterations=iterations,
                    nodes_expanded=expanded,
                    elapsed=time.time() - start_time,
                    records=records,
                )
                logger.debug("Path %d -> %d found: %d nodes, cost %.3f, %d expanded",
                             start.id, target.id, len(path), result.cost, expanded)
                return result

            if not current_record.closed:
                open_list.remove(current_id)
                current_record.closed = True
                expanded += 1

            for neighbor in current.neighbors:
                neighbor_record = records.get(neighbor.id)
                if neighbor_record is None:
                    raise NodeNotFoundError(neighbor.id, "neighbor")
                if neighbor_record.closed:
                    continue

                tentative_g = current_record.g + self.heuristic.estimate(
                    current.position, neighbor.position)

                if not neighbor_record.checked or tentative_g < neighbor_record.g:
                    neighbor_record.parent = current_id
                    neighbor_record.g = tentative_g

                    if not neighbor_record.checked:
                        neighbor_record.checked = True
                        open_list.append(neighbor.id)

        logger.debug("No path %d -> %d after expanding %d nodes",
                     start.id, target.id, expanded)
        return SearchResult(
            found=False,
            iterations=iterations,
            nodes_expanded=expanded,
            elapsed=time.time() - start_time,
            records=records,
        )

    @staticmethod
    def _index_nodes(nodes: Sequence[PathNode]) -> Dict[int, PathNode]:
        index = {}
        for node in nodes:
            if node.id in index:
                raise DuplicateNodeIdError(node.id)
            index[node.id] = node
        return index

    @staticmethod
    def _lowest_f(open_list: List[int], records: Dict[int, SearchRecord]) -> int:
        # strict < keeps the earliest inserted node on ties
        lowest = open_list[0]
        lowest_f = records[lowest].f
        for node_id in open_list:
            f = records[node_id].f
            if f < lowest_f:
                lowest, lowest_f = node_id, f
        return lowest

    @staticmethod
    def _traceback(node_id: int, index: Dict[int, PathNode],
                   records: Dict[int, SearchRecord]) -> List[PathNode]:
        """
        Follow parent ids from a node back to the start.

        Returns:
            List of nodes from the given node to the start, both included
        """
        path = [index[node_id]]
        parent = records[node_id].parent
        while parent is not None:
            path.append(index[parent])
            parent = records[parent].parent
        return path


def find_path(start: PathNode, target: PathNode, nodes: Sequence[PathNode],
              heuristic: Heuristic = Heuristic.EUCLIDEAN) -> Optional[List[PathNode]]:
    """
    Compute a path from start to target with A*.

    Args:
        start: Start node
        target: Target node
        nodes: Every node of the graph
        heuristic: Distance measure (default: Euclidean)

    Returns:
        Nodes from target back to start, or None if no path exists

    Example:
        >>> build_gabriel_graph(nodes)
        >>> path = find_path(nodes[0], nodes[5], nodes)
        >>> if path:
        >>>     print([node.id for node in reversed(path)])
    """
    return AStarSearch(heuristic).search(start, target, nodes).path


class AStarPlanner(PathPlanner):
    """
    A* path planning over the Gabriel graph of a point cloud.

    Attributes:
        search_engine (AStarSearch): Engine configured from the parameters
        result (Optional[SearchResult]): Result of the last search
        graph_built (bool): Whether build_graph() has run on the current nodes
        start (Optional[Node]): Start node of the last search
        goal (Optional[Node]): Goal node of the last search
    """

    def _initialize_algorithm(self) -> None:
        """Initialize A*-specific data structures."""
        params = self.config.get('parameters', {})

        self.heuristic = Heuristic.from_name(params.get('heuristic_type', 'euclidean'))
        self.symmetrize = bool(params.get('symmetrize', False))
        self.search_engine = AStarSearch(
            heuristic=self.heuristic,
            initial_g=float(params.get('initial_g', DEFAULT_INITIAL_G)),
            max_iterations=params.get('max_iterations'),
        )
        self.result: Optional[SearchResult] = None
        self.graph_built = False
        self.start = None
        self.goal = None

    def regenerate(self, num_points: int, seed: Optional[int] = None) -> None:
        """
        Scatter a fresh point set and discard the previous graph and search.

        Args:
            num_points: Number of points to generate
            seed: Seed for the random generator
        """
        self.environment.generate(num_points, seed=seed)
        self.graph_built = False
        self.result = None
        self.path = None
        self.start = None
        self.goal = None

    def build_graph(self) -> None:
        """Build the Gabriel graph of the environment's nodes."""
        start_time = time.time()
        build_gabriel_graph(self.environment.nodes, symmetrize=self.symmetrize)
        self.build_time = time.time() - start_time
        self.graph_built = True
        logger.info("Gabriel graph of %d nodes built in %.3fs",
                    len(self.environment.nodes), self.build_time)

    def plan(self, start_id: int, goal_id: int):
        """
        Compute a path between two nodes with A*.

        Args:
            start_id: Id of the start node
            goal_id: Id of the goal node

        Returns:
            Nodes from goal back to start if a path is found, None otherwise

        Raises:
            GraphNotBuiltError: If build_graph() has not been called
            NodeNotFoundError: If either id is unknown
        """
        if not self.graph_built:
            raise GraphNotBuiltError("Graph not built. Run build_graph() first.")

        self.start = self.get_node(start_id, "start")
        self.goal = self.get_node(goal_id, "goal")

        self.result = self.search_engine.search(self.start, self.goal, self.environment.nodes)
        self.path = self.result.path
        self.planning_time = self.result.elapsed
        self._color_nodes()
        return self.path

    def get_metrics(self) -> Dict[str, Any]:
        """
        Get algorithm performance metrics.

        Returns:
            Dictionary with:
            - num_nodes / num_edges: Size of the graph
            - path_length: Euclidean length of the path
            - path_cost: Accumulated g-cost of the path
            - build_time / planning_time: Timings of the two phases
            - nodes_explored: Number of nodes expanded
        """
        result = self.result
        return {
            'algorithm': 'A*',
            'heuristic': self.heuristic.value,
            'num_nodes': len(self.environment.nodes),
            'num_edges': len(graph_edges(self.environment.nodes)),
            'path_length': self.get_path_length(),
            'path_cost': result.cost if result else 0.0,
            'path_nodes': len(self.path) if self.path else 0,
            'build_time': self.build_time,
            'planning_time': self.planning_time,
            'nodes_explored': result.nodes_expanded if result else 0,
            'path_exists': self.path is not None
        }

    def visualize(self, ax, **kwargs) -> None:
        """
        Visualize the graph and the A* path on matplotlib axis.

        Args:
            ax: Matplotlib axis
            **kwargs: show_explored (bool), node_size (float)
        """
        node_size = kwargs.get('node_size', 25)
        draw_graph(ax, self.environment.nodes, node_size=node_size)

        if self.result is None:
            ax.set_title(f"Gabriel graph ({len(self.environment.nodes)} nodes)")
            self._frame(ax)
            return

        if kwargs.get('show_explored', True):
            draw_explored(ax, self.environment.nodes, self.result.records, node_size=node_size)
        if self.path:
            draw_path(ax, self.path, path_label="A* Path")
        draw_endpoints(ax, self.start, self.goal)
        ax.legend(loc='best')

        status = f"Length: {self.get_path_length():.2f}" if self.path else "No path"
        ax.set_title(f"A* on Gabriel graph\n"
                     f"{status}, "
                     f"Time: {self.planning_time:.3f}s, "
                     f"Nodes: {self.result.nodes_expanded}")
        self._frame(ax)

    def _color_nodes(self) -> None:
        """Mark the endpoints and the path so draw_graph shows them."""
        for node in self.environment.nodes:
            node.color = 'node'
        for node in self.path or ():
            node.color = 'path_node'
        self.start.color = 'start'
        self.goal.color = 'goal'

    def _frame(self, ax) -> None:
        width, height = self.environment.map_size
        setup_plot_limits(ax, 0, width, 0, height, margin=0)
