"""
Distance calculation using the Haversine formula.

Assumption
----------
Facilities are ranked by great-circle (Haversine) distance, not by road
distance.  A routing engine would give better travel estimates, but the
ranking only needs a stable "how far away" ordering and must work without
external API keys.

Complexity: O(1) per call.
"""

from __future__ import annotations

import math

from .entities import Coordinate

EARTH_RADIUS_KM = 6_371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points.

    No range checks are made: malformed input (e.g. NaN) simply
    propagates through the floating-point arithmetic.
    """
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(math.radians(lat1))
        * math.cos(math.radians(lat2))
        * math.sin(dlng / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def distance(user: Coordinate, target: Coordinate) -> float:
    """Distance in km from *user* to *target*."""
    return haversine_km(
        user.latitude, user.longitude, target.latitude, target.longitude
    )


def format_distance(km: float) -> str:
    return f"{km:.1f} km"
