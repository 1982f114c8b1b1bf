"""
Visualization utilities for proximity graphs and paths.

This module provides the color palette and the matplotlib drawing functions
for node sets, their Gabriel edges, explored nodes and found paths.
"""

from typing import Dict, Optional, Sequence

from matplotlib.collections import LineCollection

from .graph_builder import graph_edges
from ..core.node import Node, SearchRecord


PALETTE: Dict[str, str] = {
    'background': '#172121',
    'node': '#70877F',
    'edge': '#34403A',
    'explored': '#D8D8C0',
    'start': '#70877F',
    'goal': '#FF6F59',
    'path': '#664E4C',
    'path_node': '#DA2745',
}


def color_of(key: str) -> str:
    """
    Resolve a palette key to a color.

    Unknown keys are passed through so any matplotlib color string works.

    Example:
        >>> color_of('goal')
        '#FF6F59'
        >>> color_of('white')
        'white'
    """
    return PALETTE.get(key, key)


def draw_graph(ax,
               nodes: Sequence[Node],
               node_size: float = 25,
               edge_width: float = 1.0):
    """
    Draw a node set and its neighbor edges.

    Args:
        ax: Matplotlib axis to draw on
        nodes: Nodes with neighbor lists assigned (empty lists draw no edges)
        node_size: Marker size of the nodes
        edge_width: Line width of the edges

    Example:
        >>> fig, ax = plt.subplots()
        >>> draw_graph(ax, cloud.nodes)
        >>> plt.show()
    """
    ax.clear()
    ax.set_facecolor(PALETTE['background'])

    segments = [(tuple(a.position), tuple(b.position)) for a, b in graph_edges(nodes)]
    if segments:
        ax.add_collection(LineCollection(segments, colors=PALETTE['edge'],
                                         linewidths=edge_width, zorder=1))

    if nodes:
        xs = [node.x for node in nodes]
        ys = [node.y for node in nodes]
        colors = [color_of(node.color) for node in nodes]
        ax.scatter(xs, ys, c=colors, s=node_size, zorder=2)

    ax.set_aspect('equal', adjustable='box')


def draw_explored(ax,
                  nodes: Sequence[Node],
                  records: Dict[int, SearchRecord],
                  node_size: float = 25):
    """
    Highlight the nodes a search expanded.

    Args:
        ax: Matplotlib axis
        nodes: Node set that was searched
        records: Search records keyed by node id
        node_size: Marker size
    """
    explored = [node for node in nodes
                if node.id in records and records[node.id].closed]
    if not explored:
        return

    ax.scatter([n.x for n in explored], [n.y for n in explored],
               color=PALETTE['explored'], s=node_size, alpha=0.35, zorder=3)


def draw_path(ax,
              path: Sequence[Node],
              path_label: str = "Path",
              linewidth: float = 2.0):
    """
    Draw a path and mark its nodes.

    Args:
        ax: Matplotlib axis
        path: Nodes along the path, in either direction
        path_label: Label for the path in legend
        linewidth: Line width of the path
    """
    if not path:
        return

    xs = [node.x for node in path]
    ys = [node.y for node in path]
    ax.plot(xs, ys, color=PALETTE['path'], linewidth=linewidth,
            label=path_label, zorder=4)
    ax.scatter(xs, ys, color=PALETTE['path_node'], s=30, zorder=5)


def draw_endpoints(ax, start: Optional[Node] = None, goal: Optional[Node] = None):
    """
    Mark the start and goal nodes.

    Args:
        ax: Matplotlib axis
        start: Optional start node
        goal: Optional goal node
    """
    if start is not None:
        ax.scatter(start.x, start.y, color=PALETTE['start'], s=120, marker='o',
                   label="Start", zorder=10, edgecolors='white', linewidths=1.5)
    if goal is not None:
        ax.scatter(goal.x, goal.y, color=PALETTE['goal'], s=160, marker='*',
                   label="Goal", zorder=10, edgecolors='white', linewidths=1.0)


def setup_plot_limits(ax, x_min: float, x_max: float, y_min: float, y_max: float, margin: float = 1.0):
    """
    Set plot axis limits with optional margin.

    Args:
        ax: Matplotlib axis
        x_min: Minimum x value
        x_max: Maximum x value
        y_min: Minimum y value
        y_max: Maximum y value
        margin: Additional margin around boundaries (default: 1.0)
    """
    ax.set_xlim(x_min - margin, x_max + margin)
    ax.set_ylim(y_min - margin, y_max + margin)


def save_figure(fig, filename: str, dpi: int = 150):
    """
    Save a figure to file, using the palette background.

    Args:
        fig: Matplotlib figure
        filename: Output filename (e.g., 'graph.png')
        dpi: Output resolution
    """
    fig.savefig(filename, dpi=dpi, bbox_inches='tight',
                facecolor=PALETTE['background'])
