"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from pipenet.graph import Graph
from pipenet.pipelines import PipelineNetwork

SAMPLE_EDGES = [
    ("A", "B", 12.5),
    ("B", "C", 6.25),
    ("D", "E", 18.2),
    ("E", "F", 9.1),
    ("C", "G", 15.7),
    ("G", "H", 7.85),
]


@pytest.fixture
def sample_graph() -> Graph:
    """The eight-node sample graph (D-E-F is disconnected from the rest)."""
    return Graph.from_edges("ABCDEFGH", SAMPLE_EDGES)


@pytest.fixture
def diamond_graph() -> Graph:
    """Two routes from S to T: the direct edge is heavier than the detour."""
    return Graph.from_edges(
        ["S", "X", "Y", "T"],
        [("S", "T", 10.0), ("S", "X", 2.0), ("X", "Y", 3.0), ("Y", "T", 1.0)],
    )


@pytest.fixture
def sample_network() -> PipelineNetwork:
    """Fresh sample pipeline network."""
    return PipelineNetwork.from_sample()
