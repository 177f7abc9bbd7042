"""
Geometry Helpers

Great-circle distance, initial bearing and angular arithmetic on
latitude/longitude coordinates. Pure functions, no state.
"""

import math
from typing import Iterable, List

from poolmatch.algorithms.types import Coordinate

EARTH_RADIUS_KM = 6371.0


def clamp01(value: float) -> float:
    """Clamp a value into [0, 1]."""
    return max(0.0, min(1.0, value))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Haversine distance in kilometers.

    The square-root argument is clamped to 1 so floating-point overshoot
    on near-antipodal points never leaves the domain of asin.
    """
    d_lat = math.radians(b.lat - a.lat)
    d_lng = math.radians(b.lng - a.lng)
    lat1 = math.radians(a.lat)
    lat2 = math.radians(b.lat)

    sin_d_lat = math.sin(d_lat / 2)
    sin_d_lng = math.sin(d_lng / 2)
    h = sin_d_lat * sin_d_lat + math.cos(lat1) * math.cos(lat2) * sin_d_lng * sin_d_lng

    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(h)))


def bearing_deg(origin: Coordinate, dest: Coordinate) -> float:
    """
    Initial compass bearing from origin to dest, in [0, 360).

    Coincident points have no direction; atan2(0, 0) gives 0.
    """
    phi1 = math.radians(origin.lat)
    phi2 = math.radians(dest.lat)
    d_lambda = math.radians(dest.lng - origin.lng)

    y = math.sin(d_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(d_lambda)

    return _normalize_deg(math.degrees(math.atan2(y, x)))


def angle_diff_deg(a: float, b: float) -> float:
    """Smallest absolute difference between two bearings, in [0, 180]."""
    return abs(((a - b + 540.0) % 360.0) - 180.0)


def circular_mean_deg(bearings: Iterable[float]) -> float:
    """
    Mean direction of a set of bearings, in [0, 360).

    Averages unit vectors rather than raw degrees, so 350 and 10 average
    to 0 instead of 180. An empty input yields 0.
    """
    values = list(bearings)
    if not values:
        return 0.0

    x = sum(math.cos(math.radians(b)) for b in values) / len(values)
    y = sum(math.sin(math.radians(b)) for b in values) / len(values)

    return _normalize_deg(math.degrees(math.atan2(y, x)))


def centroid(points: List[Coordinate]) -> Coordinate:
    """Arithmetic mean of coordinates (origin for an empty list)."""
    if not points:
        return Coordinate(lat=0.0, lng=0.0)

    return Coordinate(
        lat=sum(p.lat for p in points) / len(points),
        lng=sum(p.lng for p in points) / len(points),
    )


def _normalize_deg(value: float) -> float:
    result = (value + 360.0) % 360.0
    # -0.0 and float rounding can land exactly on 360
    return 0.0 if result >= 360.0 else result
