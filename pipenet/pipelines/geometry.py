"""
Great-circle distances for pipeline polylines.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

EARTH_RADIUS_KM = 6371.0

Coordinate = tuple[float, float]


def haversine_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance between two (lat, lon) points in kilometers."""
    return float(segment_lengths_km([a, b])[0])


def segment_lengths_km(coordinates: Sequence[Coordinate]) -> np.ndarray:
    """
    Length of every leg of a polyline in kilometers.

    Returns an array with len(coordinates) - 1 entries.
    """
    if len(coordinates) < 2:
        return np.zeros(0)

    points = np.radians(np.asarray(coordinates, dtype=np.float64))
    lat1, lon1 = points[:-1, 0], points[:-1, 1]
    lat2, lon2 = points[1:, 0], points[1:, 1]

    h = (
        np.sin((lat2 - lat1) / 2) ** 2
        + np.cos(lat1) * np.cos(lat2) * np.sin((lon2 - lon1) / 2) ** 2
    )
    return 2 * EARTH_RADIUS_KM * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0)))


def polyline_length_km(coordinates: Sequence[Coordinate]) -> float:
    """Total polyline length in kilometers, rounded to 2 decimals."""
    return round(float(segment_lengths_km(coordinates).sum()), 2)
