"""
Flask app for the pipeline network: map page plus a JSON API.
"""

import logging
import threading
from html import escape

from flask import Flask, jsonify, redirect, render_template_string, request, url_for

from pipenet.config import (
    DEFAULT_ROUTE_FINISH,
    DEFAULT_ROUTE_START,
    FLASK_HOST,
    FLASK_PORT,
    LOG_LEVEL,
    SECRET_KEY,
)
from pipenet.graph import GraphError, NotFoundError, PreconditionError
from pipenet.pipelines import PipelineNetwork
from ui.components.charts import create_metrics_chart, create_network_map

logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = SECRET_KEY

# Session network, rebuilt from the sample data on reset
_network = PipelineNetwork.from_sample()
_network_lock = threading.Lock()


def get_network() -> PipelineNetwork:
    return _network


def reset_network() -> PipelineNetwork:
    """Replace the session network with a fresh copy of the sample data."""
    global _network
    with _network_lock:
        _network = PipelineNetwork.from_sample()
    return _network


def parse_coordinates(text: str) -> list[list[float]]:
    """Parse "lat,lon; lat,lon; ..." as typed into the draw form."""
    points = []
    for chunk in text.replace("\n", ";").split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        parts = [p.strip() for p in chunk.split(",")]
        if len(parts) != 2:
            raise PreconditionError(f"Invalid point {chunk!r}, expected 'lat,lon'")
        try:
            points.append([float(parts[0]), float(parts[1])])
        except ValueError:
            raise PreconditionError(f"Invalid point {chunk!r}, expected numbers") from None
    return points


@app.errorhandler(NotFoundError)
def handle_not_found(error: NotFoundError):
    logger.warning(f"Not found: {error}")
    return jsonify({"error": str(error)}), 404


@app.errorhandler(PreconditionError)
def handle_precondition(error: PreconditionError):
    logger.warning(f"Bad request: {error}")
    return jsonify({"error": str(error)}), 400


# =============================================================================
# JSON API
# =============================================================================

@app.route("/api/pipelines")
def list_pipelines():
    return jsonify({"pipelines": [p.to_dict() for p in get_network().pipelines]})


@app.route("/api/pipelines", methods=["POST"])
def draw_pipeline():
    """Add a pipeline drawn as a polyline: {"coordinates": [[lat, lon], ...]}."""
    payload = request.get_json(silent=True) or {}
    coordinates = payload.get("coordinates")
    if not isinstance(coordinates, list):
        raise PreconditionError("Request body must contain a 'coordinates' list")

    with _network_lock:
        pipeline = get_network().draw_pipeline(coordinates)
    return jsonify(pipeline.to_dict()), 201


@app.route("/api/pipelines/<int:pipeline_id>")
def get_pipeline(pipeline_id: int):
    return jsonify(get_network().get_pipeline(pipeline_id).to_dict())


@app.route("/api/pipelines/<int:pipeline_id>/analyze", methods=["POST"])
def analyze_pipeline(pipeline_id: int):
    with _network_lock:
        pipeline = get_network().analyze_health(pipeline_id)
    return jsonify(pipeline.to_dict())


@app.route("/api/nodes")
def list_nodes():
    return jsonify({"nodes": [n.to_dict() for n in get_network().nodes]})


@app.route("/api/summary")
def summary():
    return jsonify(get_network().summary().to_dict())


@app.route("/api/route")
def route():
    start = request.args.get("start", DEFAULT_ROUTE_START)
    finish = request.args.get("finish", DEFAULT_ROUTE_FINISH)
    with _network_lock:
        result = get_network().find_route(start, finish)
    return jsonify(result.to_dict())


@app.route("/api/reset", methods=["POST"])
def reset():
    network = reset_network()
    return jsonify({"pipelines": len(network.pipelines), "nodes": len(network.nodes)})


# =============================================================================
# Map Page
# =============================================================================

BASE_TEMPLATE = """
<!DOCTYPE html>
<html>
<head>
    <meta charset="utf-8">
    <title>Pipeline Management System</title>
    <style>
        * { box-sizing: border-box; margin: 0; padding: 0; }
        body { font-family: system-ui, -apple-system, sans-serif; background: #f5f5f5; min-height: 100vh; }
        .header { background: #1a1a2e; color: white; padding: 15px 30px; display: flex; justify-content: space-between; align-items: center; }
        .header h1 { font-size: 1.5rem; }
        .container { max-width: 1200px; margin: 0 auto; padding: 20px; }
        .card { background: white; border-radius: 12px; box-shadow: 0 2px 8px rgba(0,0,0,0.1); padding: 25px; margin-bottom: 20px; }
        h2 { margin-bottom: 15px; color: #1a1a2e; }
        input[type="text"] { padding: 10px 12px; border: 2px solid #ddd; border-radius: 8px; font-size: 15px; }
        button { background: #4ecdc4; color: white; border: none; padding: 10px 24px; border-radius: 8px; font-size: 15px; cursor: pointer; }
        button:hover { background: #45b7aa; }
        .form-row { display: flex; gap: 15px; align-items: center; flex-wrap: wrap; }
        .stats { display: grid; grid-template-columns: repeat(4, 1fr); gap: 15px; }
        .stat-card { background: #ecf0f1; border-radius: 8px; padding: 15px; text-align: center; }
        .stat-card p { font-size: 1.6rem; font-weight: 600; color: #1a1a2e; }
        .route { background: #f3e5f5; border-left: 4px solid purple; padding: 10px 15px; margin-top: 15px; }
        .error { background: #fdecea; border-left: 4px solid #e74c3c; padding: 10px 15px; margin-top: 15px; }
    </style>
</head>
<body>
    {{ content | safe }}
</body>
</html>
"""


@app.route("/")
def home():
    """Map view with route finder, draw form, and network summary."""
    network = get_network()
    start = request.args.get("start", DEFAULT_ROUTE_START)
    finish = request.args.get("finish", DEFAULT_ROUTE_FINISH)

    route_html = ""
    result = None
    with _network_lock:
        if "start" in request.args:
            try:
                result = network.find_route(start, finish)
                if result.reachable:
                    route_html = (
                        f'<div class="route">Shortest path: {escape(" → ".join(result.path))} '
                        f"({result.distance:.2f} km)</div>"
                    )
                else:
                    route_html = (
                        f'<div class="error">No path from {escape(start)} to {escape(finish)}</div>'
                    )
            except GraphError as e:
                route_html = f'<div class="error">{escape(str(e))}</div>'

        stats = network.summary()
        map_html = create_network_map(network, result).to_html(full_html=False, include_plotlyjs="cdn")
        metrics_html = create_metrics_chart(network.pipelines).to_html(full_html=False, include_plotlyjs=False)

    content = f"""
    <div class="header">
        <h1>Pipeline Management System</h1>
    </div>
    <div class="container">
        <div class="card">
            <h2>Find Shortest Path</h2>
            <form method="GET" action="/" class="form-row">
                <input type="text" name="start" value="{escape(start)}" placeholder="Start node">
                <input type="text" name="finish" value="{escape(finish)}" placeholder="Finish node">
                <button type="submit">Find Shortest Path</button>
            </form>
            {route_html}
        </div>
        <div class="card">{map_html}</div>
        <div class="card">
            <h2>Draw Pipeline</h2>
            <form method="POST" action="/draw" class="form-row">
                <input type="text" name="coordinates" size="60" placeholder="51.505,-0.09; 51.52,-0.08">
                <button type="submit">Add Pipeline</button>
            </form>
        </div>
        <div class="card">
            <h2>Pipeline Network Summary</h2>
            <div class="stats">
                <div class="stat-card"><h3>Total Pipelines</h3><p>{stats.total_pipelines}</p></div>
                <div class="stat-card"><h3>Average Health</h3><p>{stats.average_health}%</p></div>
                <div class="stat-card"><h3>Total Leakages</h3><p>{stats.total_leakages}</p></div>
                <div class="stat-card"><h3>Total Length</h3><p>{stats.total_length:.1f} km</p></div>
            </div>
        </div>
        <div class="card">{metrics_html}</div>
    </div>
    """

    return render_template_string(BASE_TEMPLATE, content=content)


@app.route("/draw", methods=["POST"])
def draw_from_form():
    try:
        coordinates = parse_coordinates(request.form.get("coordinates", ""))
        with _network_lock:
            get_network().draw_pipeline(coordinates)
    except PreconditionError as e:
        logger.warning(f"Rejected drawn pipeline: {e}")
    return redirect(url_for("home"))


if __name__ == "__main__":
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    print("\n=== Pipeline Management System ===")
    print(f"Open http://{FLASK_HOST}:{FLASK_PORT} in your browser\n")
    app.run(host=FLASK_HOST, port=FLASK_PORT, debug=False)
