"""
Pipeline network dataclasses.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum

from pipenet.config import HEALTH_FAIR_THRESHOLD, HEALTH_GOOD_THRESHOLD


class HealthStatus(str, Enum):
    """Health band of a pipeline, with the color it is drawn in."""

    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @classmethod
    def from_health(cls, health: float) -> HealthStatus:
        if health > HEALTH_GOOD_THRESHOLD:
            return cls.GOOD
        if health > HEALTH_FAIR_THRESHOLD:
            return cls.FAIR
        return cls.POOR

    @property
    def color(self) -> str:
        return {"good": "green", "fair": "orange", "poor": "red"}[self.value]


@dataclass(frozen=True)
class Node:
    """
    A junction or endpoint of the network.

    Attributes:
        id: Identifier used as the graph vertex (e.g., "A")
        position: (lat, lon) of the node
        name: Display name
    """

    id: str
    position: tuple[float, float]
    name: str = ""

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", f"Node {self.id}")

    def to_dict(self) -> dict:
        return {"id": self.id, "position": list(self.position), "name": self.name}


@dataclass(frozen=True)
class Segment:
    """
    One graph edge contributed by a pipeline.

    Attributes:
        start: Node id at one end
        end: Node id at the other end
        length: Edge weight in kilometers
    """

    start: str
    end: str
    length: float


@dataclass
class Pipeline:
    """
    A pipeline drawn on the map, with its mock inspection metrics.

    Attributes:
        id: Sequential pipeline id
        coordinates: Polyline vertices as (lat, lon)
        length: Length in kilometers
        material: Pipe material
        health: Health score 0-100
        leakages: Number of known leakages
        pressure: Pressure in PSI
        flow_rate: Flow rate in cubic meters per hour
        last_inspection: ISO date of the last inspection
        segments: Graph edges this pipeline provides
        ai_analyzed: Whether health was re-assessed by the analysis step
    """

    id: int
    coordinates: list[tuple[float, float]]
    length: float
    material: str
    health: int
    leakages: int
    pressure: int
    flow_rate: int
    last_inspection: str
    segments: list[Segment] = field(default_factory=list)
    ai_analyzed: bool = False

    @property
    def health_status(self) -> HealthStatus:
        return HealthStatus.from_health(self.health)

    @property
    def node_ids(self) -> list[str]:
        """Node ids touched by this pipeline, in segment order."""
        ids: list[str] = []
        for segment in self.segments:
            for node_id in (segment.start, segment.end):
                if node_id not in ids:
                    ids.append(node_id)
        return ids

    def to_dict(self) -> dict:
        data = asdict(self)
        data["coordinates"] = [list(c) for c in self.coordinates]
        data["health_status"] = self.health_status.value
        return data
