"""
Facility sources.

``SyntheticFacilitySource`` stands in for a real facility directory (a
geospatial index or a places API).  It places ten well-known hospitals at
fixed offsets from the querying position, so results are always "nearby"
wherever the user is.  Replacing it only requires another
``FacilitySource`` that returns ``Facility`` records with valid
coordinates; the ranking pipeline does not change.
"""

from __future__ import annotations

import asyncio
import logging
from abc import ABC, abstractmethod

from src.domain.entities import Coordinate, Facility

logger = logging.getLogger(__name__)


class FacilitySource(ABC):
    @abstractmethod
    async def fetch(self, near: Coordinate) -> list[Facility]:
        """Return unranked facilities around *near*.

        Raises ``FacilityRetrievalError`` when the source cannot answer.
        """


# (id, name, lat offset, lng offset, address, phone, has_emergency)
HOSPITAL_CATALOGUE: list[tuple[str, str, float, float, str, str, bool]] = [
    ("h1", "Mayo Clinic Hospital", 0.01, 0.01,
     "5777 E Mayo Blvd, Phoenix, AZ 85054", "(480) 342-1000", True),
    ("h2", "Cleveland Clinic", -0.008, 0.005,
     "9500 Euclid Ave, Cleveland, OH 44195", "(216) 444-2200", True),
    ("h3", "Johns Hopkins Hospital", 0.015, -0.01,
     "1800 Orleans St, Baltimore, MD 21287", "(410) 955-5000", True),
    ("h4", "Massachusetts General Hospital", -0.012, -0.008,
     "55 Fruit St, Boston, MA 02114", "(617) 726-2000", True),
    ("h5", "NewYork-Presbyterian Hospital", 0.02, 0.018,
     "525 E 68th St, New York, NY 10065", "(212) 746-5454", True),
    ("h6", "UCSF Medical Center", -0.018, 0.022,
     "505 Parnassus Ave, San Francisco, CA 94143", "(415) 476-1000", True),
    ("h7", "UCLA Medical Center", 0.025, -0.015,
     "757 Westwood Plaza, Los Angeles, CA 90095", "(310) 267-8000", True),
    ("h8", "Stanford Health Care", -0.022, -0.02,
     "300 Pasteur Dr, Stanford, CA 94305", "(650) 723-4000", True),
    ("h9", "Cedars-Sinai Medical Center", 0.03, 0.025,
     "8700 Beverly Blvd, Los Angeles, CA 90048", "(310) 423-3277", True),
    ("h10", "Northwestern Memorial Hospital", -0.028, 0.015,
     "251 E Huron St, Chicago, IL 60611", "(312) 926-2000", True),
]


def offset_coordinate(origin: Coordinate, dlat: float, dlng: float) -> Coordinate:
    """Shift *origin* by degree offsets, keeping the result in range.

    Latitude is clamped at the poles; longitude wraps at the antimeridian.
    """
    lat = min(90.0, max(-90.0, origin.latitude + dlat))
    lng = origin.longitude + dlng
    if lng > 180.0:
        lng -= 360.0
    elif lng < -180.0:
        lng += 360.0
    return Coordinate(lat, lng)


class SyntheticFacilitySource(FacilitySource):
    def __init__(self, delay_seconds: float = 0.0):
        self.delay_seconds = delay_seconds

    async def fetch(self, near: Coordinate) -> list[Facility]:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        facilities = [
            Facility(
                id=fid,
                name=name,
                location=offset_coordinate(near, dlat, dlng),
                address=address,
                phone=phone,
                has_emergency=emergency,
            )
            for fid, name, dlat, dlng, address, phone, emergency in HOSPITAL_CATALOGUE
        ]
        logger.debug(
            "Synthesised %d facilities around (%.5f, %.5f)",
            len(facilities), near.latitude, near.longitude,
        )
        return facilities
