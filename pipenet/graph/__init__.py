"""
Graph algorithms module.

Provides the weighted shortest-path engine for the pipeline network:
- PriorityQueue: Min-priority queue driving the search
- Graph: Undirected weighted adjacency-list graph with Dijkstra
- Route: Result of a shortest-path query
"""

from pipenet.graph.errors import GraphError, NotFoundError, PreconditionError
from pipenet.graph.priority_queue import PriorityQueue, PriorityQueueEntry
from pipenet.graph.weighted_graph import Graph, Neighbor, Route

__all__ = [
    "Graph",
    "GraphError",
    "Neighbor",
    "NotFoundError",
    "PreconditionError",
    "PriorityQueue",
    "PriorityQueueEntry",
    "Route",
]
