"""
Graph construction utilities for proximity-graph path planning.

This module builds the Gabriel graph of a point set: two points are adjacent
iff the circle having them as diameter endpoints contains no other point of
the set. The membership test is exhaustive (every ordered pair against every
third point) and neighbor lists are written onto the nodes in place.

Used by: AStarPlanner and the CLI demo
"""

import logging
from typing import Iterable, List, Sequence, Tuple

from .geometry import Coordinate, circle_contains
from ..core.exceptions import DegenerateSegmentError, DuplicateNodeIdError
from ..core.node import Node

logger = logging.getLogger(__name__)


def is_gabriel_edge(a: Coordinate, b: Coordinate, others: Iterable[Coordinate]) -> bool:
    """
    Test whether segment AB is an edge of the Gabriel graph.

    Args:
        a: First endpoint (x, y)
        b: Second endpoint (x, y)
        others: Every other point of the set (must not include a or b)

    Returns:
        True if no point of ``others`` lies inside or on the circle with
        diameter AB

    Example:
        >>> is_gabriel_edge((0, 0), (10, 0), [(5, 1)])
        False
        >>> is_gabriel_edge((0, 0), (10, 0), [(5, 8)])
        True
    """
    for c in others:
        if circle_contains(a, b, c):
            return False
    return True


def validate_nodes(nodes: Sequence[Node]) -> None:
    """
    Check that a node set can be turned into a Gabriel graph.

    Raises:
        DuplicateNodeIdError: If two nodes share an id
        DegenerateSegmentError: If two nodes share a position
    """
    seen_ids = set()
    seen_positions = set()
    for node in nodes:
        if node.id in seen_ids:
            raise DuplicateNodeIdError(node.id)
        seen_ids.add(node.id)

        position = tuple(node.position)
        if position in seen_positions:
            raise DegenerateSegmentError(position, position)
        seen_positions.add(position)


def build_gabriel_graph(nodes: Sequence[Node], symmetrize: bool = False) -> None:
    """
    Assign Gabriel-graph neighbors to every node in place.

    For every ordered pair (i, y) with i != y, node y is appended to the
    neighbors of node i when no third node j lies within the circle whose
    diameter is the segment between them. The scan over j stops at the first
    containing node.

    Args:
        nodes: Node set; neighbor lists are overwritten
        symmetrize: If True, add the reverse of every one-sided edge after the
                    directed pass (default: False)

    Raises:
        DuplicateNodeIdError: If two nodes share an id
        DegenerateSegmentError: If two nodes share a position

    Note:
        Neighbor lists follow the order of ``nodes``, so the same input
        sequence always produces the same lists.

    Performance:
        - Time complexity: O(N³) where N = nodes
        - Space complexity: O(N²) for the neighbor lists
    """
    validate_nodes(nodes)

    num_nodes = len(nodes)
    positions = [node.position for node in nodes]

    for i in range(num_nodes):
        neighbors = []

        for y in range(num_nodes):
            if y == i:
                continue

            others = (positions[j] for j in range(num_nodes) if j != i and j != y)
            if is_gabriel_edge(positions[i], positions[y], others):
                neighbors.append(nodes[y])

        nodes[i].neighbors = neighbors

    if symmetrize:
        added = _symmetrize(nodes)
        logger.debug("Symmetrized Gabriel graph: %d reverse edges added", added)

    logger.debug("Built Gabriel graph: %d nodes, %d edges",
                 num_nodes, len(graph_edges(nodes)))


def _symmetrize(nodes: Sequence[Node]) -> int:
    """Append B -> A wherever only A -> B exists. Returns the number added."""
    pending = []
    for node in nodes:
        for neighbor in node.neighbors:
            if node not in neighbor.neighbors:
                pending.append((neighbor, node))

    for node, neighbor in pending:
        if neighbor not in node.neighbors:
            node.neighbors.append(neighbor)
    return len(pending)


def graph_edges(nodes: Sequence[Node]) -> List[Tuple[Node, Node]]:
    """
    Collect the undirected edges of a built graph.

    An edge is reported once, in the order it is first met, even if both
    endpoints list each other.

    Args:
        nodes: Node set with neighbor lists assigned

    Returns:
        List of (node, neighbor) pairs
    """
    edges = []
    seen = set()
    for node in nodes:
        for neighbor in node.neighbors:
            key = (min(node.id, neighbor.id), max(node.id, neighbor.id))
            if key in seen:
                continue
            seen.add(key)
            edges.append((node, neighbor))
    return edges
