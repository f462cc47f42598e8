#!/usr/bin/env python3
"""
Geo helpers - great-circle distance between two coordinates.

Both the match score and discovery's radius filter measure separation
with the same haversine formula, so it lives here on its own.
"""

import math
from dataclasses import dataclass

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class Coordinate:
    """A latitude/longitude pair in decimal degrees.

    Values are not range-checked. (0, 0) is a legitimate point and is also
    what profiles without a location carry.
    """
    latitude: float
    longitude: float


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """
    Haversine distance in kilometers between two coordinates.

    Symmetric, zero for identical points, never raises. Out-of-range
    degrees produce a number, not an error; a NaN or infinite degree
    gives math.inf, which no radius or distance score accepts.
    """
    if not all(math.isfinite(v) for v in (a.latitude, a.longitude, b.latitude, b.longitude)):
        return math.inf

    d_lat = math.radians(b.latitude - a.latitude)
    d_lon = math.radians(b.longitude - a.longitude)

    h = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(a.latitude))
        * math.cos(math.radians(b.latitude))
        * math.sin(d_lon / 2) ** 2
    )
    # Float error can push h a hair past 1 for antipodal points
    h = min(max(h, 0.0), 1.0)

    return 2 * EARTH_RADIUS_KM * math.atan2(math.sqrt(h), math.sqrt(1 - h))
