"""
Coordinate Parsing

Shipment and carrier records store locations as free text such as
"28.6448, 77.2167". These helpers pull the numeric pair out of that text.
"""

import logging
import math
import re
from typing import Any, Optional

from poolmatch.algorithms.types import Coordinate

logger = logging.getLogger(__name__)

# Both parts must carry a decimal point, as stored by the map picker
LAT_LNG_PATTERN = re.compile(r"(-?\d+\.\d+)\s*,\s*(-?\d+\.\d+)")


def parse_lat_lng(text: Optional[str]) -> Optional[Coordinate]:
    """
    Extract the first "lat,lng" pair from free text.

    Returns None when no pair is found or a value overflows to infinity.
    Ranges are not checked.

    Example:
        >>> parse_lat_lng("Connaught Place (28.6448, 77.2167)")
        Coordinate(lat=28.6448, lng=77.2167)
        >>> parse_lat_lng("somewhere") is None
        True
    """
    if not text:
        return None

    found = LAT_LNG_PATTERN.search(text)
    if not found:
        logger.debug(f"No coordinate pair in: {text!r}")
        return None

    return _finite(float(found.group(1)), float(found.group(2)))


def coerce_coordinate(value: Any) -> Optional[Coordinate]:
    """
    Accept a Coordinate, a {"lat", "lng"} mapping, a (lat, lng) pair,
    or "lat,lng" text.
    """
    if value is None:
        return None
    if isinstance(value, Coordinate):
        return value
    if isinstance(value, str):
        return parse_lat_lng(value)
    if isinstance(value, dict):
        lat = value.get("lat", value.get("latitude"))
        lng = value.get("lng", value.get("longitude"))
        if lat is None or lng is None:
            return None
        return _finite(float(lat), float(lng))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return _finite(float(value[0]), float(value[1]))
    return None


def _finite(lat: float, lng: float) -> Optional[Coordinate]:
    if not (math.isfinite(lat) and math.isfinite(lng)):
        return None
    return Coordinate(lat=lat, lng=lng)
