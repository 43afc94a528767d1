#!/usr/bin/env python3
"""
Pipeline route CLI - Find the shortest route through the sample network.

Usage:
    python scripts/find_route.py
    python scripts/find_route.py --start A --finish H
    python scripts/find_route.py --start A --finish D
    python scripts/find_route.py --draw "51.535,-0.13;51.54,-0.1" --start A --finish F
    python scripts/find_route.py --summary
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from pipenet.config import DEFAULT_ROUTE_FINISH, DEFAULT_ROUTE_START, LOG_LEVEL  # noqa: E402
from pipenet.graph import GraphError  # noqa: E402
from pipenet.pipelines import PipelineNetwork  # noqa: E402

logger = logging.getLogger(__name__)


def parse_points(text: str) -> list[tuple[float, float]]:
    """Parse "lat,lon;lat,lon" into coordinate pairs."""
    points = []
    for chunk in text.split(";"):
        if chunk.strip():
            lat, lon = chunk.split(",")
            points.append((float(lat), float(lon)))
    return points


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Find the shortest route between two pipeline nodes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--start", "-s", default=DEFAULT_ROUTE_START, help="Start node id")
    parser.add_argument("--finish", "-f", default=DEFAULT_ROUTE_FINISH, help="Finish node id")
    parser.add_argument(
        "--draw",
        action="append",
        default=[],
        metavar="POINTS",
        help='Add a pipeline before routing, e.g. "51.535,-0.13;51.54,-0.1" (repeatable)',
    )
    parser.add_argument("--summary", action="store_true", help="Print the network summary")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    network = PipelineNetwork.from_sample()

    try:
        for text in args.draw:
            pipeline = network.draw_pipeline(parse_points(text))
            print(f"Added pipeline #{pipeline.id} ({pipeline.length} km)")

        if args.summary:
            stats = network.summary()
            print("\n=== Network Summary ===")
            print(f"Pipelines:      {stats.total_pipelines}")
            print(f"Average health: {stats.average_health}%")
            print(f"Leakages:       {stats.total_leakages}")
            print(f"Total length:   {stats.total_length:.1f} km")

        route = network.find_route(args.start, args.finish)
    except (GraphError, ValueError) as e:
        logger.error(str(e))
        return 1

    print(f"\n=== Route {args.start} -> {args.finish} ===")
    if not route.reachable:
        print("No path found")
        return 0

    print(f"Path:     {' -> '.join(route.path)}")
    print(f"Distance: {route.distance:.2f} km")
    print(f"Hops:     {len(route.path) - 1}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
