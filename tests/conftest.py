"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

from pathlib import Path

import matplotlib
import pytest

matplotlib.use("Agg")

from gabriel_paths.core.environment import PointCloud  # noqa: E402
from gabriel_paths.core.node import Node  # noqa: E402


def _link(*chain: Node) -> None:
    """Connect consecutive nodes of a chain in both directions."""
    for a, b in zip(chain, chain[1:]):
        a.neighbors.append(b)
        b.neighbors.append(a)


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def config_dir(project_root: Path) -> Path:
    """Return the shipped configuration directory."""
    return project_root / "configs"


@pytest.fixture
def line_nodes() -> list:
    """Four nodes at x = 0, 10, 20, 30, each linked to its immediate neighbors."""
    nodes = [Node(i, 10 * i, 0) for i in range(4)]
    _link(*nodes)
    return nodes


@pytest.fixture
def cloud() -> PointCloud:
    """A small seeded point cloud with 40 points generated."""
    cloud = PointCloud(map_size=(200, 150))
    cloud.generate(40, seed=3)
    return cloud
