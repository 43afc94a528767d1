"""
Plotly chart components for the pipeline network.
"""

import plotly.graph_objects as go

from pipenet.config import (
    ANALYZED_LINE_WIDTH,
    CHART_HEIGHT,
    MAP_CENTER,
    NODE_MARKER_SIZE,
    PIPELINE_LINE_WIDTH,
    ROUTE_LINE_WIDTH,
)
from pipenet.pipelines import Pipeline, PipelineNetwork, PipelineRoute


def create_network_map(network: PipelineNetwork, route: PipelineRoute | None = None) -> go.Figure:
    """Pipelines colored by health, nodes, and an optional highlighted route."""
    fig = go.Figure()

    for p in network.pipelines:
        lats = [c[0] for c in p.coordinates]
        lons = [c[1] for c in p.coordinates]
        analyzed = " (AI Analyzed)" if p.ai_analyzed else ""
        fig.add_trace(go.Scatter(
            x=lons,
            y=lats,
            mode="lines",
            line=dict(
                color=p.health_status.color,
                width=ANALYZED_LINE_WIDTH if p.ai_analyzed else PIPELINE_LINE_WIDTH,
            ),
            name=f"Pipeline {p.id}",
            hovertemplate=(
                f"<b>Pipeline #{p.id}</b><br>"
                f"Length: {p.length} km<br>"
                f"Material: {p.material}<br>"
                f"Health: {p.health}%{analyzed}<br>"
                f"Leakages: {p.leakages}<br>"
                f"Pressure: {p.pressure} PSI<br>"
                f"Flow Rate: {p.flow_rate} m³/h<br>"
                f"Last Inspection: {p.last_inspection}<extra></extra>"
            ),
            showlegend=False,
        ))

    if route is not None and route.reachable:
        fig.add_trace(go.Scatter(
            x=[pos[1] for pos in route.positions],
            y=[pos[0] for pos in route.positions],
            mode="lines",
            line=dict(color="purple", width=ROUTE_LINE_WIDTH, dash="dash"),
            name="Shortest Path",
            hovertemplate=f"Route: {route.distance:.2f} km<extra></extra>",
        ))

    nodes = network.nodes
    fig.add_trace(go.Scatter(
        x=[n.position[1] for n in nodes],
        y=[n.position[0] for n in nodes],
        mode="markers+text",
        marker=dict(size=NODE_MARKER_SIZE, color="lightblue", line=dict(width=2, color="blue")),
        text=[n.id for n in nodes],
        textposition="top center",
        name="Nodes",
        customdata=[n.name for n in nodes],
        hovertemplate="<b>%{customdata}</b><br>%{y:.4f}, %{x:.4f}<extra></extra>",
    ))

    fig.update_layout(
        title="Pipeline Network",
        xaxis_title="Longitude",
        yaxis_title="Latitude",
        height=CHART_HEIGHT * 2,
        margin=dict(t=40, b=40, l=50, r=15),
        legend=dict(orientation="h", y=-0.1),
    )
    if not nodes:
        fig.update_xaxes(range=[MAP_CENTER[1] - 0.05, MAP_CENTER[1] + 0.05])
        fig.update_yaxes(range=[MAP_CENTER[0] - 0.05, MAP_CENTER[0] + 0.05])
    fig.update_yaxes(scaleanchor="x", scaleratio=1.6)
    return fig


def create_metrics_chart(pipelines: list[Pipeline]) -> go.Figure:
    """Line chart of health % and pressure per pipeline."""
    labels = [f"Pipeline {p.id}" for p in pipelines]

    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=labels,
        y=[p.health for p in pipelines],
        mode="lines+markers",
        name="Health %",
        line=dict(color="rgb(75, 192, 192)", shape="spline", smoothing=0.3),
    ))
    fig.add_trace(go.Scatter(
        x=labels,
        y=[p.pressure for p in pipelines],
        mode="lines+markers",
        name="Pressure (PSI)",
        line=dict(color="rgb(255, 99, 132)", shape="spline", smoothing=0.3),
    ))

    fig.update_layout(
        title="Pipeline Metrics Comparison",
        height=CHART_HEIGHT,
        margin=dict(t=35, b=40, l=45, r=15),
        legend=dict(orientation="h", y=1.12, x=0),
    )
    return fig


def create_health_bar_chart(pipelines: list[Pipeline]) -> go.Figure:
    """Bar chart of health per pipeline, colored by health band."""
    fig = go.Figure(data=[
        go.Bar(
            x=[f"Pipeline {p.id}" for p in pipelines],
            y=[p.health for p in pipelines],
            marker_color=[p.health_status.color for p in pipelines],
        )
    ])

    fig.update_layout(
        title="Health",
        yaxis_title="Health %",
        yaxis_range=[0, 105],
        showlegend=False,
        height=CHART_HEIGHT,
        margin=dict(t=35, b=40, l=45, r=15),
    )
    return fig
