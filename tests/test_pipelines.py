"""
Unit tests for the pipeline network layer.
"""

import math
import random
from datetime import date

import pytest

from pipenet.config import DRAWN_HEALTH_RANGE, DRAWN_MATERIAL
from pipenet.graph import NotFoundError, PreconditionError
from pipenet.pipelines import HealthStatus, Node, Pipeline, PipelineNetwork, Segment
from pipenet.pipelines.geometry import haversine_km, polyline_length_km, segment_lengths_km


class TestGeometry:
    """Test great-circle helpers."""

    def test_same_point_is_zero(self):
        """A point is zero km from itself."""
        assert haversine_km((51.5, -0.1), (51.5, -0.1)) == 0.0

    def test_one_degree_latitude(self):
        """One degree of latitude is about 111 km."""
        assert haversine_km((0.0, 0.0), (1.0, 0.0)) == pytest.approx(111.19, abs=0.01)

    def test_segment_count(self):
        """One length per leg."""
        assert len(segment_lengths_km([(0, 0), (0, 1), (1, 1)])) == 2
        assert len(segment_lengths_km([(0, 0)])) == 0

    def test_polyline_length_is_rounded_sum(self):
        """Polyline length sums legs and rounds to 2 decimals."""
        coords = [(51.505, -0.09), (51.51, -0.1), (51.515, -0.11)]
        expected = round(haversine_km(coords[0], coords[1]) + haversine_km(coords[1], coords[2]), 2)
        assert polyline_length_km(coords) == expected


class TestModels:
    """Test pipeline dataclasses."""

    @pytest.mark.parametrize(
        ("health", "status", "color"),
        [
            (100, HealthStatus.GOOD, "green"),
            (81, HealthStatus.GOOD, "green"),
            (80, HealthStatus.FAIR, "orange"),
            (61, HealthStatus.FAIR, "orange"),
            (60, HealthStatus.POOR, "red"),
            (0, HealthStatus.POOR, "red"),
        ],
    )
    def test_health_bands(self, health, status, color):
        """Health thresholds are strict."""
        assert HealthStatus.from_health(health) is status
        assert status.color == color

    def test_node_default_name(self):
        """Nodes are named after their id by default."""
        assert Node("A", (0.0, 0.0)).name == "Node A"

    def test_pipeline_node_ids(self, sample_network):
        """Node ids follow segment order without repeats."""
        assert sample_network.get_pipeline(3).node_ids == ["C", "G", "H"]

    def test_pipeline_to_dict(self, sample_network):
        """Serialized pipelines include derived health status."""
        data = sample_network.get_pipeline(1).to_dict()
        assert data["id"] == 1
        assert data["health_status"] == "good"
        assert data["coordinates"][0] == [51.505, -0.09]
        assert data["segments"][1] == {"start": "B", "end": "C", "length": 6.25}


class TestSampleNetwork:
    """Test the preloaded sample data."""

    def test_counts(self, sample_network):
        """Eight nodes and three pipelines."""
        assert len(sample_network.nodes) == 8
        assert len(sample_network.pipelines) == 3

    def test_graph_edges(self, sample_network):
        """Segments become graph edges with their lengths."""
        graph = sample_network.build_graph()
        assert graph.edge_weight("A", "B") == 12.5
        assert graph.edge_weight("B", "C") == 6.25
        assert graph.edge_weight("G", "H") == 7.85
        assert graph.edge_weight("C", "D") is None

    def test_route_a_to_h(self, sample_network):
        """The sample route and its highlight positions."""
        route = sample_network.find_route("A", "H")
        assert route.path == ["A", "B", "C", "G", "H"]
        assert route.distance == pytest.approx(42.3)
        assert route.positions[0] == (51.505, -0.09)
        assert route.positions[-1] == (51.535, -0.13)

    def test_route_unreachable(self, sample_network):
        """A and D are not connected."""
        route = sample_network.find_route("A", "D")
        assert not route.reachable
        assert route.path == []
        assert route.positions == []
        assert route.distance == math.inf
        assert route.to_dict()["distance"] is None

    def test_route_overflowing_distance_serializes_as_null(self):
        """A route whose length overflows is reachable but has no JSON distance."""
        network = PipelineNetwork([Node("A", (0.0, 0.0)), Node("B", (0.0, 1.0)), Node("C", (0.0, 2.0))])
        network.add_pipeline(Pipeline(
            id=1, coordinates=[], length=1.0, material="PVC", health=90,
            leakages=0, pressure=40, flow_rate=900, last_inspection="2025-01-01",
            segments=[Segment("A", "B", 1e308), Segment("B", "C", 1e308)],
        ))
        route = network.find_route("A", "C")
        assert route.path == ["A", "B", "C"]
        assert route.distance == math.inf
        data = route.to_dict()
        assert data["reachable"] is True
        assert data["distance"] is None

    def test_route_unknown_node(self, sample_network):
        """Unknown nodes raise NotFoundError."""
        with pytest.raises(NotFoundError):
            sample_network.find_route("A", "Q")

    def test_summary(self, sample_network):
        """Summary matches the sample metrics."""
        stats = sample_network.summary()
        assert stats.total_pipelines == 3
        assert stats.average_health == 83
        assert stats.total_leakages == 3
        assert stats.total_length == pytest.approx(46.4)

    def test_empty_summary(self):
        """An empty network has zeroed statistics."""
        stats = PipelineNetwork().summary()
        assert stats.total_pipelines == 0
        assert stats.average_health == 0
        assert stats.total_length == 0.0


class TestNetworkMutation:
    """Test adding, drawing, and analyzing pipelines."""

    def test_add_pipeline_unknown_node_raises(self, sample_network):
        """Segments must reference registered nodes."""
        pipeline = Pipeline(
            id=10, coordinates=[], length=1.0, material="PVC", health=90,
            leakages=0, pressure=40, flow_rate=900, last_inspection="2025-01-01",
            segments=[Segment("A", "Q", 1.0)],
        )
        with pytest.raises(PreconditionError):
            sample_network.add_pipeline(pipeline)
        assert len(sample_network.pipelines) == 3

    def test_add_pipeline_duplicate_id_raises(self, sample_network):
        """Pipeline ids are unique."""
        with pytest.raises(PreconditionError):
            sample_network.add_pipeline(sample_network.get_pipeline(1))

    def test_get_pipeline_unknown_raises(self, sample_network):
        """Unknown pipeline ids raise NotFoundError."""
        with pytest.raises(NotFoundError) as exc_info:
            sample_network.get_pipeline(99)
        assert exc_info.value.kind == "Pipeline"

    def test_draw_pipeline_mock_metrics(self, sample_network):
        """Drawn pipelines get the next id and mock metrics."""
        pipeline = sample_network.draw_pipeline(
            [(51.55, -0.2), (51.56, -0.21)], rng=random.Random(7)
        )
        assert pipeline.id == 4
        assert pipeline.material == DRAWN_MATERIAL
        assert DRAWN_HEALTH_RANGE[0] <= pipeline.health <= DRAWN_HEALTH_RANGE[1]
        assert 0 <= pipeline.leakages <= 2
        assert 30 <= pipeline.pressure <= 49
        assert 800 <= pipeline.flow_rate <= 1299
        assert pipeline.last_inspection == date.today().isoformat()
        assert pipeline.length == polyline_length_km([(51.55, -0.2), (51.56, -0.21)])

    def test_draw_pipeline_creates_nodes(self, sample_network):
        """Points away from existing nodes become new nodes."""
        pipeline = sample_network.draw_pipeline([(51.55, -0.2), (51.56, -0.21)])
        assert pipeline.node_ids == ["N9", "N10"]
        assert sample_network.get_node("N9").position == (51.55, -0.2)

    def test_drawn_pipeline_connects_components(self, sample_network):
        """Drawing H to F lets the route reach the D-E-F pipeline."""
        sample_network.draw_pipeline([(51.535, -0.13), (51.54, -0.1)])
        route = sample_network.find_route("A", "D")
        assert route.path == ["A", "B", "C", "G", "H", "F", "E", "D"]

        drawn_leg = sample_network.build_graph().edge_weight("H", "F")
        assert route.distance == pytest.approx(42.3 + drawn_leg + 9.1 + 18.2)

    def test_draw_pipeline_too_short_raises(self, sample_network):
        """A pipeline needs two points."""
        with pytest.raises(PreconditionError):
            sample_network.draw_pipeline([(51.5, -0.1)])
        assert len(sample_network.pipelines) == 3

    @pytest.mark.parametrize(
        "bad",
        [
            [(51.5,), (51.6, -0.1)],
            [("x", 1.0), (51.6, -0.1)],
            [(math.nan, 0.0), (1.0, 1.0)],
            [{"lat": 1, "lon": 2}, {"lat": 3, "lon": 4}],
            ["12", "34"],
            [b"12", b"34"],
            [(1.0, 2.0, 3.0), (4.0, 5.0)],
            [12, 34],
        ],
    )
    def test_draw_pipeline_bad_coordinates_raise(self, sample_network, bad):
        """Malformed points are rejected before anything is added."""
        with pytest.raises(PreconditionError):
            sample_network.draw_pipeline(bad)
        assert len(sample_network.nodes) == 8

    def test_analyze_health_adjusts_and_marks(self, sample_network):
        """Analysis shifts health by at most 5 and flags the pipeline."""
        pipeline = sample_network.analyze_health(2, rng=random.Random(3))
        assert pipeline.ai_analyzed
        assert 87 <= pipeline.health <= 96

    def test_analyze_health_clamps(self, sample_network):
        """Health stays within 0-100."""
        pipeline = sample_network.get_pipeline(1)
        pipeline.health = 100
        for seed in range(20):
            sample_network.analyze_health(1, rng=random.Random(seed))
            assert 0 <= pipeline.health <= 100

    def test_analyze_unknown_pipeline_raises(self, sample_network):
        """Analyzing a missing pipeline raises NotFoundError."""
        with pytest.raises(NotFoundError):
            sample_network.analyze_health(42)
