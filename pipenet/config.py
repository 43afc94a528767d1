"""
Configuration constants for the pipeline network project.

All tunable parameters are defined here.
Secrets and deployment settings are loaded from environment variables.
"""

import os

# =============================================================================
# Map Configuration
# =============================================================================

# Initial map view (London, matching the sample network)
MAP_CENTER = (51.515, -0.09)

# Drawn vertices closer than this (degrees) to a node reuse that node
NODE_SNAP_TOLERANCE_DEG = 1e-6

# Prefix for nodes created from drawn pipelines
DRAWN_NODE_PREFIX = "N"

# =============================================================================
# Health Configuration
# =============================================================================

# health > GOOD is green, health > FAIR is orange, anything else is red
HEALTH_GOOD_THRESHOLD = 80
HEALTH_FAIR_THRESHOLD = 60

# Simulated re-analysis shifts health by randint(MIN, MAX)
HEALTH_ADJUSTMENT_MIN = -5
HEALTH_ADJUSTMENT_MAX = 4

# =============================================================================
# Drawn Pipeline Defaults
# =============================================================================

# Mock metrics assigned to newly drawn pipelines (inclusive ranges)
DRAWN_MATERIAL = "Steel"
DRAWN_HEALTH_RANGE = (60, 99)
DRAWN_LEAKAGES_RANGE = (0, 2)
DRAWN_PRESSURE_RANGE = (30, 49)
DRAWN_FLOW_RATE_RANGE = (800, 1299)

# =============================================================================
# Routing Configuration
# =============================================================================

DEFAULT_ROUTE_START = "A"
DEFAULT_ROUTE_FINISH = "H"

# =============================================================================
# Web Configuration
# =============================================================================

SECRET_KEY = os.environ.get("PIPENET_SECRET_KEY", "pipenet-dev-key-change-in-production")
FLASK_HOST = os.environ.get("PIPENET_HOST", "127.0.0.1")
FLASK_PORT = int(os.environ.get("PIPENET_PORT", "5000"))

# =============================================================================
# Visualization Configuration
# =============================================================================

PIPELINE_LINE_WIDTH = 5
ANALYZED_LINE_WIDTH = 7
ROUTE_LINE_WIDTH = 6
NODE_MARKER_SIZE = 12
CHART_HEIGHT = 320

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
