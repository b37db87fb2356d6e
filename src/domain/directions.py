"""Directions links to a facility via the Google Maps URLs API."""

from __future__ import annotations

from urllib.parse import urlencode

from .entities import Coordinate
from .enums import TravelMode

GOOGLE_MAPS_DIRECTIONS_URL = "https://www.google.com/maps/dir/"


def directions_url(
    destination: Coordinate, mode: TravelMode = TravelMode.DRIVING
) -> str:
    """
    Build a directions link to *destination*.

    The origin is left out so the maps client routes from the device's
    own position.
    """
    params = {
        "api": 1,
        "destination": f"{destination.latitude},{destination.longitude}",
        "travelmode": TravelMode(mode).value,
    }
    return f"{GOOGLE_MAPS_DIRECTIONS_URL}?{urlencode(params, safe=',')}"
