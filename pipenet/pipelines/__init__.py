"""
Pipeline network module.

Provides the domain layer on top of the graph engine:
- Node, Segment, Pipeline: Network elements with mock metrics
- PipelineNetwork: Session network with drawing, analysis, and routing
- PipelineRoute, NetworkSummary: Results for the presentation layer
"""

from pipenet.pipelines.models import HealthStatus, Node, Pipeline, Segment
from pipenet.pipelines.network import NetworkSummary, PipelineNetwork, PipelineRoute

__all__ = [
    "HealthStatus",
    "Node",
    "Segment",
    "Pipeline",
    "PipelineNetwork",
    "PipelineRoute",
    "NetworkSummary",
]
