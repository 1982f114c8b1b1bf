"""
Node model for graph search.

Static node data (id, position, neighbors) lives on ``Node``. Everything a
search mutates lives in a ``SearchRecord`` owned by that search, so a node
set can be searched any number of times without resetting anything.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Optional, Protocol, Sequence, Union


class Point(NamedTuple):
    """Immutable (x, y) position."""

    x: Union[int, float]
    y: Union[int, float]


class PathNode(Protocol):
    """
    Capabilities a node must offer to be searchable by the A* engine.

    Any object exposing these three attributes qualifies; no base class is
    required.
    """

    id: int
    position: Point
    neighbors: Sequence["PathNode"]


class Node:
    """
    Represents a point of the cloud and its proximity-graph neighbors.

    Two nodes compare equal when their ids match, regardless of position.

    Attributes:
        id (int): Identifier, unique within a node set
        position (Point): Location of the node
        neighbors (List[Node]): Adjacent nodes, filled in by the graph builder
        color (str): Palette key used when drawing the node
    """

    __slots__ = ("id", "position", "neighbors", "color")

    def __init__(self, node_id: int, x: Union[int, float], y: Union[int, float],
                 color: str = "node"):
        """
        Initialize a node at given coordinates.

        Args:
            node_id: Identifier, unique within its node set
            x: X-coordinate
            y: Y-coordinate
            color: Palette key for rendering (default: 'node')
        """
        self.id = node_id
        self.position = Point(x, y)
        self.neighbors: List["Node"] = []
        self.color = color

    @property
    def x(self) -> Union[int, float]:
        return self.position.x

    @property
    def y(self) -> Union[int, float]:
        return self.position.y

    def __eq__(self, other) -> bool:
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    def __repr__(self) -> str:
        """String representation of the node."""
        return (f"Node(id={self.id}, x={self.position.x}, y={self.position.y}, "
                f"neighbors={len(self.neighbors)})")


@dataclass
class SearchRecord:
    """
    Search-scoped bookkeeping for one node.

    Attributes:
        g (float): Accumulated cost from the start node
        h (float): Heuristic estimate to the target
        checked (bool): Node has been placed on the open list
        closed (bool): Node has been expanded and is final
        parent (Optional[int]): Id of the node this one was reached from
    """

    g: float
    h: float = 0.0
    checked: bool = False
    closed: bool = False
    parent: Optional[int] = field(default=None)

    @property
    def f(self) -> float:
        """Sum of accumulated cost and heuristic estimate."""
        return self.g + self.h
