"""
In-memory pipeline network: nodes, pipelines, and route finding.

Usage:
    from pipenet.pipelines import PipelineNetwork

    network = PipelineNetwork.from_sample()
    route = network.find_route("A", "H")
    route.path       # ["A", "B", "C", "G", "H"]
    route.distance   # 42.3
"""

from __future__ import annotations

import logging
import math
import random
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import date

import numpy as np

from pipenet.config import (
    DRAWN_FLOW_RATE_RANGE,
    DRAWN_HEALTH_RANGE,
    DRAWN_LEAKAGES_RANGE,
    DRAWN_MATERIAL,
    DRAWN_NODE_PREFIX,
    DRAWN_PRESSURE_RANGE,
    HEALTH_ADJUSTMENT_MAX,
    HEALTH_ADJUSTMENT_MIN,
    NODE_SNAP_TOLERANCE_DEG,
)
from pipenet.graph import Graph, NotFoundError, PreconditionError
from pipenet.pipelines.geometry import polyline_length_km, segment_lengths_km
from pipenet.pipelines.models import Node, Pipeline, Segment
from pipenet.pipelines.sample import sample_nodes, sample_pipelines

logger = logging.getLogger(__name__)


@dataclass
class PipelineRoute:
    """
    Shortest route between two nodes, ready for highlighting.

    Attributes:
        start: Requested start node id
        finish: Requested finish node id
        path: Node ids along the route (empty if unreachable)
        distance: Total length in kilometers (math.inf if unreachable)
        positions: (lat, lon) of each node on the path
    """

    start: str
    finish: str
    path: list[str] = field(default_factory=list)
    distance: float = math.inf
    positions: list[tuple[float, float]] = field(default_factory=list)

    @property
    def reachable(self) -> bool:
        return bool(self.path)

    def to_dict(self) -> dict:
        return {
            "start": self.start,
            "finish": self.finish,
            "reachable": self.reachable,
            "path": list(self.path),
            "distance": self.distance if math.isfinite(self.distance) else None,
            "positions": [list(p) for p in self.positions],
        }


@dataclass
class NetworkSummary:
    """Aggregate statistics shown on the analytics view."""

    total_pipelines: int
    average_health: int
    total_leakages: int
    total_length: float

    def to_dict(self) -> dict:
        return {
            "total_pipelines": self.total_pipelines,
            "average_health": self.average_health,
            "total_leakages": self.total_leakages,
            "total_length": self.total_length,
        }


class PipelineNetwork:
    """
    Nodes and pipelines of one session.

    The routing graph is rebuilt from the current pipelines for every
    route query, so drawn pipelines take part in routing immediately.
    """

    def __init__(
        self,
        nodes: Sequence[Node] = (),
        pipelines: Sequence[Pipeline] = (),
    ) -> None:
        self._nodes: dict[str, Node] = {}
        self._pipelines: dict[int, Pipeline] = {}

        for node in nodes:
            self.add_node(node)
        for pipeline in pipelines:
            self.add_pipeline(pipeline)

    @classmethod
    def from_sample(cls) -> PipelineNetwork:
        """Network preloaded with the sample nodes and pipelines."""
        return cls(sample_nodes(), sample_pipelines())

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def nodes(self) -> list[Node]:
        return list(self._nodes.values())

    @property
    def pipelines(self) -> list[Pipeline]:
        return list(self._pipelines.values())

    def get_node(self, node_id: str) -> Node:
        try:
            return self._nodes[node_id]
        except KeyError:
            raise NotFoundError(node_id, kind="Node") from None

    def get_pipeline(self, pipeline_id: int) -> Pipeline:
        try:
            return self._pipelines[pipeline_id]
        except KeyError:
            raise NotFoundError(pipeline_id, kind="Pipeline") from None

    def next_pipeline_id(self) -> int:
        return max(self._pipelines, default=0) + 1

    # =========================================================================
    # Mutation
    # =========================================================================

    def add_node(self, node: Node) -> None:
        """Register a node. Re-adding an id replaces its position and name."""
        self._nodes[node.id] = node

    def add_pipeline(self, pipeline: Pipeline) -> None:
        """
        Register a pipeline.

        Raises:
            PreconditionError: If the id is taken or a segment references
                an unknown node
        """
        if pipeline.id in self._pipelines:
            raise PreconditionError(f"Pipeline {pipeline.id} already exists")
        for segment in pipeline.segments:
            for node_id in (segment.start, segment.end):
                if node_id not in self._nodes:
                    raise PreconditionError(
                        f"Pipeline {pipeline.id} references unknown node {node_id!r}"
                    )
        self._pipelines[pipeline.id] = pipeline

    def draw_pipeline(
        self,
        coordinates: Sequence[Sequence[float]],
        rng: random.Random | None = None,
    ) -> Pipeline:
        """
        Add a pipeline from a drawn polyline.

        Each vertex snaps to an existing node at the same position, or
        becomes a new node. Segment weights are the great-circle lengths
        of the legs; the inspection metrics are mock values.

        Raises:
            PreconditionError: If fewer than two points are given
        """
        points = [_as_coordinate(c) for c in coordinates]
        if len(points) < 2:
            raise PreconditionError("A pipeline needs at least two points")

        rng = rng or random.Random()
        node_ids = [self._node_at(point).id for point in points]
        legs = segment_lengths_km(points)
        segments = [
            Segment(a, b, round(float(length), 3))
            for a, b, length in zip(node_ids[:-1], node_ids[1:], legs)
            if a != b
        ]

        pipeline = Pipeline(
            id=self.next_pipeline_id(),
            coordinates=points,
            length=polyline_length_km(points),
            material=DRAWN_MATERIAL,
            health=rng.randint(*DRAWN_HEALTH_RANGE),
            leakages=rng.randint(*DRAWN_LEAKAGES_RANGE),
            pressure=rng.randint(*DRAWN_PRESSURE_RANGE),
            flow_rate=rng.randint(*DRAWN_FLOW_RATE_RANGE),
            last_inspection=date.today().isoformat(),
            segments=segments,
        )
        self.add_pipeline(pipeline)
        logger.info(
            f"Drew pipeline {pipeline.id}: {pipeline.length} km through "
            f"{' -> '.join(node_ids)}"
        )
        return pipeline

    def analyze_health(
        self,
        pipeline_id: int,
        rng: random.Random | None = None,
    ) -> Pipeline:
        """
        Simulated re-assessment of a pipeline's health.

        Shifts health by a small random amount, clamps to 0-100 and marks
        the pipeline as analyzed.

        Raises:
            NotFoundError: If the pipeline does not exist
        """
        pipeline = self.get_pipeline(pipeline_id)
        rng = rng or random.Random()
        adjustment = rng.randint(HEALTH_ADJUSTMENT_MIN, HEALTH_ADJUSTMENT_MAX)
        previous = pipeline.health
        pipeline.health = min(100, max(0, previous + adjustment))
        pipeline.ai_analyzed = True
        logger.info(f"Analyzed pipeline {pipeline_id}: health {previous} -> {pipeline.health}")
        return pipeline

    # =========================================================================
    # Routing
    # =========================================================================

    def build_graph(self) -> Graph:
        """Routing graph with every node as a vertex and every segment as an edge."""
        graph = Graph()
        for node_id in self._nodes:
            graph.add_vertex(node_id)
        for pipeline in self._pipelines.values():
            for segment in pipeline.segments:
                graph.add_edge(segment.start, segment.end, segment.length)
        return graph

    def find_route(self, start: str, finish: str) -> PipelineRoute:
        """
        Shortest route between two nodes.

        Raises:
            NotFoundError: If start or finish is not a known node
        """
        route = self.build_graph().shortest_route(start, finish)
        if not route.reachable:
            logger.info(f"No route from {start!r} to {finish!r}")
            return PipelineRoute(start=start, finish=finish)

        logger.info(
            f"Route {start!r} -> {finish!r} ({route.distance:.2f} km): "
            f"{' -> '.join(route.path)}"
        )
        return PipelineRoute(
            start=start,
            finish=finish,
            path=list(route.path),
            distance=route.distance,
            positions=[self._nodes[node_id].position for node_id in route.path],
        )

    # =========================================================================
    # Statistics
    # =========================================================================

    def summary(self) -> NetworkSummary:
        pipelines = self.pipelines
        if not pipelines:
            return NetworkSummary(0, 0, 0, 0.0)

        health = np.array([p.health for p in pipelines], dtype=np.float64)
        return NetworkSummary(
            total_pipelines=len(pipelines),
            average_health=int(round(float(health.mean()))),
            total_leakages=sum(p.leakages for p in pipelines),
            total_length=round(sum(p.length for p in pipelines), 1),
        )

    def _node_at(self, point: tuple[float, float]) -> Node:
        """Existing node at this position, or a newly registered one."""
        for node in self._nodes.values():
            if (
                abs(node.position[0] - point[0]) <= NODE_SNAP_TOLERANCE_DEG
                and abs(node.position[1] - point[1]) <= NODE_SNAP_TOLERANCE_DEG
            ):
                return node

        index = len(self._nodes) + 1
        while f"{DRAWN_NODE_PREFIX}{index}" in self._nodes:
            index += 1
        node = Node(f"{DRAWN_NODE_PREFIX}{index}", point)
        self.add_node(node)
        return node

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(nodes={len(self._nodes)}, "
            f"pipelines={len(self._pipelines)})"
        )


def _as_coordinate(value: Sequence[float]) -> tuple[float, float]:
    if not isinstance(value, Sequence) or isinstance(value, (str, bytes)) or len(value) != 2:
        raise PreconditionError(f"Invalid coordinate {value!r}, expected [lat, lon]")
    try:
        lat, lon = float(value[0]), float(value[1])
    except (TypeError, ValueError):
        raise PreconditionError(f"Invalid coordinate {value!r}, expected [lat, lon]") from None
    if not (math.isfinite(lat) and math.isfinite(lon)):
        raise PreconditionError(f"Invalid coordinate {value!r}, expected finite numbers")
    return lat, lon
