"""
Gabriel Paths - proximity graphs and A* search over random point clouds

Modules:
    core.node: Point, Node and the per-search SearchRecord
    core.environment: Random point cloud generation
    utils.geometry: Distances and circle containment
    utils.graph_builder: Gabriel graph construction
    algorithms.astar: A* search engine and planner
    utils.visualization: Matplotlib rendering
"""

from .algorithms.astar import AStarPlanner, AStarSearch, Heuristic, SearchResult, find_path
from .core.environment import PointCloud
from .core.exceptions import (DegenerateSegmentError, DuplicateNodeIdError, GraphError,
                              GraphNotBuiltError, NodeNotFoundError, SearchLimitExceeded)
from .core.node import Node, PathNode, Point, SearchRecord
from .utils.geometry import circle_contains, distance, manhattan_distance
from .utils.graph_builder import build_gabriel_graph, graph_edges, is_gabriel_edge

__version__ = "1.0.0"
