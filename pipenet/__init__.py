"""
Pipeline Network Route Finder.

Visualizes a simulated pipeline network, tracks mock health metrics,
and finds the shortest route between junction nodes with Dijkstra's
algorithm.
"""

__version__ = "0.1.0"
