"""
Sample pipeline network around central London.

Three pipelines joining eight nodes. Pipelines 1 and 3 meet at node C;
pipeline 2 (D-E-F) is not connected to the others.
"""

from __future__ import annotations

from pipenet.pipelines.models import Node, Pipeline, Segment


def sample_nodes() -> list[Node]:
    return [
        Node("A", (51.505, -0.09)),
        Node("B", (51.51, -0.1)),
        Node("C", (51.515, -0.11)),
        Node("D", (51.52, -0.08)),
        Node("E", (51.53, -0.09)),
        Node("F", (51.54, -0.1)),
        Node("G", (51.525, -0.12)),
        Node("H", (51.535, -0.13)),
    ]


def sample_pipelines() -> list[Pipeline]:
    # The second leg of each pipeline is weighted at half the pipeline length
    return [
        Pipeline(
            id=1,
            coordinates=[(51.505, -0.09), (51.51, -0.1), (51.515, -0.11)],
            length=12.5,
            material="Steel",
            health=85,
            leakages=0,
            pressure=45,
            flow_rate=1200,
            last_inspection="2025-09-15",
            segments=[Segment("A", "B", 12.5), Segment("B", "C", 6.25)],
        ),
        Pipeline(
            id=2,
            coordinates=[(51.52, -0.08), (51.53, -0.09), (51.54, -0.1)],
            length=18.2,
            material="PVC",
            health=92,
            leakages=1,
            pressure=38,
            flow_rate=950,
            last_inspection="2025-08-22",
            segments=[Segment("D", "E", 18.2), Segment("E", "F", 9.1)],
        ),
        Pipeline(
            id=3,
            coordinates=[(51.515, -0.11), (51.525, -0.12), (51.535, -0.13)],
            length=15.7,
            material="Cast Iron",
            health=72,
            leakages=2,
            pressure=41,
            flow_rate=1100,
            last_inspection="2025-07-30",
            segments=[Segment("C", "G", 15.7), Segment("G", "H", 7.85)],
        ),
    ]
