"""
Exceptions raised by the graph builder and the A* engine.

All of them derive from ``ValueError``: they signal malformed input from the
caller, never an exhausted search. A search that cannot reach its target is
a normal outcome and is reported through ``SearchResult.found``.
"""


class GraphError(ValueError):
    """Base class for invalid graph or search input."""


class DegenerateSegmentError(GraphError):
    """Two points that should span a segment coincide."""

    def __init__(self, a, b):
        self.a = a
        self.b = b
        super().__init__(f"Degenerate segment: points {tuple(a)} and {tuple(b)} coincide")


class DuplicateNodeIdError(GraphError):
    """A node id appears more than once in a node set."""

    def __init__(self, node_id: int):
        self.node_id = node_id
        super().__init__(f"Duplicate node id: {node_id}")


class NodeNotFoundError(GraphError):
    """A start or target node is not part of the searched node set."""

    def __init__(self, node_id: int, role: str = "node"):
        self.node_id = node_id
        self.role = role
        super().__init__(f"{role.capitalize()} node {node_id} is not in the node set")


class GraphNotBuiltError(GraphError):
    """A search was requested before any neighbors were assigned."""


class SearchLimitExceeded(GraphError):
    """The search ran past its configured iteration budget."""

    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"A* search exceeded {limit} iterations")
