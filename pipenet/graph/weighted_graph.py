"""
Undirected weighted graph with Dijkstra shortest-path search.

Usage:
    from pipenet.graph import Graph

    graph = Graph()
    for vertex in "ABC":
        graph.add_vertex(vertex)
    graph.add_edge("A", "B", 12.5)
    graph.add_edge("B", "C", 6.25)

    graph.shortest_path("A", "C")   # ["A", "B", "C"]
    graph.shortest_route("A", "C")  # Route(path=[...], distance=18.75)
"""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from numbers import Real
from typing import NamedTuple

from pipenet.graph.errors import NotFoundError, PreconditionError
from pipenet.graph.priority_queue import PriorityQueue

logger = logging.getLogger(__name__)


class Neighbor(NamedTuple):
    """One adjacency-list entry: the vertex on the other end and the edge weight."""

    vertex: Hashable
    weight: float


@dataclass
class Route:
    """
    Result of a shortest-path query.

    Attributes:
        path: Vertices from start to finish inclusive, empty if unreachable
        distance: Total edge weight along the path (math.inf if unreachable)
    """

    path: list[Hashable] = field(default_factory=list)
    distance: float = math.inf

    @property
    def reachable(self) -> bool:
        """Whether a path was found."""
        return bool(self.path)

    @property
    def hops(self) -> int:
        """Number of edges along the path."""
        return max(len(self.path) - 1, 0)


class Graph:
    """
    Undirected weighted adjacency-list graph.

    Vertices are any hashable identifier. Every edge is stored on both of
    its endpoints with the same weight. Queries never mutate the graph, so
    one Graph can answer any number of independent shortest-path queries.
    """

    def __init__(self) -> None:
        self._adjacency: dict[Hashable, list[Neighbor]] = {}

    # =========================================================================
    # Construction
    # =========================================================================

    def add_vertex(self, vertex: Hashable) -> None:
        """Register a vertex. Adding an existing vertex is a no-op."""
        if vertex not in self._adjacency:
            self._adjacency[vertex] = []

    def add_edge(self, a: Hashable, b: Hashable, weight: float) -> None:
        """
        Connect two registered vertices with a symmetric weighted edge.

        Raises:
            PreconditionError: If either vertex is unregistered or the weight
                is not a finite, non-negative number
        """
        for vertex in (a, b):
            if vertex not in self._adjacency:
                raise PreconditionError(
                    f"Cannot add edge {a!r}-{b!r}: vertex {vertex!r} is not registered"
                )
        weight = _validate_weight(weight)

        self._adjacency[a].append(Neighbor(b, weight))
        self._adjacency[b].append(Neighbor(a, weight))

    @classmethod
    def from_edges(
        cls,
        vertices: Iterable[Hashable],
        edges: Iterable[tuple[Hashable, Hashable, float]],
    ) -> Graph:
        """Build a graph from a vertex list and (a, b, weight) triples."""
        graph = cls()
        for vertex in vertices:
            graph.add_vertex(vertex)
        for a, b, weight in edges:
            graph.add_edge(a, b, weight)
        return graph

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def vertices(self) -> list[Hashable]:
        """Registered vertices in insertion order."""
        return list(self._adjacency)

    def has_vertex(self, vertex: Hashable) -> bool:
        return vertex in self._adjacency

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def neighbors(self, vertex: Hashable) -> list[Neighbor]:
        """
        Get the adjacency list of a vertex.

        Raises:
            NotFoundError: If the vertex is not registered
        """
        self._require_vertex(vertex)
        return list(self._adjacency[vertex])

    def edge_weight(self, a: Hashable, b: Hashable) -> float | None:
        """Lightest edge weight between two vertices, or None if not adjacent."""
        self._require_vertex(a)
        self._require_vertex(b)
        weights = [n.weight for n in self._adjacency[a] if n.vertex == b]
        return min(weights) if weights else None

    def path_weight(self, path: Sequence[Hashable]) -> float:
        """
        Total weight of walking along the given vertex sequence.

        Raises:
            NotFoundError: If a vertex on the path is not registered
            PreconditionError: If two consecutive vertices are not adjacent
        """
        if len(path) == 1:
            self._require_vertex(path[0])
        total = 0.0
        for a, b in zip(path[:-1], path[1:]):
            weight = self.edge_weight(a, b)
            if weight is None:
                raise PreconditionError(f"Edge {a!r}-{b!r} not present in graph")
            total += weight
        return total

    # =========================================================================
    # Shortest Path
    # =========================================================================

    def shortest_path(self, start: Hashable, finish: Hashable) -> list[Hashable]:
        """
        Find a minimum-weight path between two vertices.

        Returns:
            Vertices from start to finish inclusive, or an empty list if
            finish cannot be reached from start

        Raises:
            NotFoundError: If start or finish is not registered
        """
        return self.shortest_route(start, finish).path

    def shortest_route(self, start: Hashable, finish: Hashable) -> Route:
        """
        Dijkstra search from start, stopping once finish is finalized.

        Every vertex is queued up front at its initial distance. Relaxing an
        edge re-queues the neighbor at its new distance instead of
        decreasing its key, so entries popped for an already finalized
        vertex are stale and skipped.

        Reachability is tracked apart from distance: a sum of finite weights
        can overflow to math.inf and must still count as a path.

        Raises:
            NotFoundError: If start or finish is not registered
        """
        self._require_vertex(start)
        self._require_vertex(finish)

        distances: dict[Hashable, float] = {}
        previous: dict[Hashable, Hashable | None] = {}
        reached: set[Hashable] = {start}
        finalized: set[Hashable] = set()
        queue = PriorityQueue()

        for vertex in self._adjacency:
            distances[vertex] = 0.0 if vertex == start else math.inf
            previous[vertex] = None
            queue.enqueue(vertex, distances[vertex])

        while not queue.is_empty():
            entry = queue.dequeue()
            current = entry.value
            if current in finalized or current not in reached:
                continue
            finalized.add(current)

            if current == finish:
                path = self._walk_back(previous, start, finish)
                logger.debug(
                    f"Shortest path {start!r} -> {finish!r}: "
                    f"{len(path) - 1} hops, distance {distances[finish]:g}"
                )
                return Route(path=path, distance=distances[finish])

            for neighbor, weight in self._adjacency[current]:
                if neighbor in finalized:
                    continue
                candidate = distances[current] + weight
                if neighbor not in reached or candidate < distances[neighbor]:
                    reached.add(neighbor)
                    distances[neighbor] = candidate
                    previous[neighbor] = current
                    queue.enqueue(neighbor, candidate)

        logger.debug(f"No path from {start!r} to {finish!r}")
        return Route()

    @staticmethod
    def _walk_back(
        previous: dict[Hashable, Hashable | None],
        start: Hashable,
        finish: Hashable,
    ) -> list[Hashable]:
        """Follow predecessors from finish back to start and reverse."""
        path = [finish]
        while path[-1] != start:
            path.append(previous[path[-1]])
        path.reverse()
        return path

    def _require_vertex(self, vertex: Hashable) -> None:
        if vertex not in self._adjacency:
            raise NotFoundError(vertex)

    def __repr__(self) -> str:
        edge_count = sum(len(n) for n in self._adjacency.values()) // 2
        return f"{self.__class__.__name__}(vertices={len(self)}, edges={edge_count})"


def _validate_weight(weight: float) -> float:
    """Return weight as a float, rejecting negative, NaN, infinite and non-numeric values."""
    if isinstance(weight, bool) or not isinstance(weight, Real):
        raise PreconditionError(f"Edge weight must be a real number, got {weight!r}")
    weight = float(weight)
    if math.isnan(weight) or math.isinf(weight):
        raise PreconditionError(f"Edge weight must be finite, got {weight!r}")
    if weight < 0:
        raise PreconditionError(f"Edge weight must be non-negative, got {weight!r}")
    return weight
