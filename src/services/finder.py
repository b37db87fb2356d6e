"""
Nearby search service
=====================

Brackets the pure ranking core with its two asynchronous collaborators:

1. await a position fix from the ``LocationProvider``;
2. await unranked facilities from the ``FacilitySource``;
3. rank them, apply the caller's filters and resolve the selection.

Failures of either collaborator propagate unchanged (``LocationUnavailable``
or ``FacilityRetrievalError``), never as an empty result.  Selection is
passed in and handed back; nothing is kept between calls, so overlapping
searches are independent and discarding stale ones is up to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from src.domain.entities import Coordinate, RankedFacility, RankedFacilityList
from src.domain.ranking import rank, select_default
from src.infrastructure.facility_source import FacilitySource
from src.infrastructure.location import LocationProvider

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NearbySearch:
    user: Coordinate
    facilities: RankedFacilityList
    selected: Optional[RankedFacility]


async def find_nearby(
    locator: LocationProvider,
    source: FacilitySource,
    limit: Optional[int] = None,
    emergency_only: bool = False,
    selected_id: Optional[str] = None,
) -> NearbySearch:
    user = await locator.locate()
    candidates = await source.fetch(user)

    ranked = rank(user, candidates)
    if emergency_only:
        ranked = [f for f in ranked if f.has_emergency]
    if limit is not None:
        ranked = ranked[:limit]

    logger.info(
        "Ranked %d of %d facilities near (%.5f, %.5f)",
        len(ranked), len(candidates), user.latitude, user.longitude,
    )
    return NearbySearch(
        user=user,
        facilities=ranked,
        selected=select_default(ranked, selected_id),
    )


async def find_facility(
    locator: LocationProvider, source: FacilitySource, facility_id: str
) -> Optional[RankedFacility]:
    """Rank around the user and return the entry with *facility_id*, if any."""
    user = await locator.locate()
    for item in rank(user, await source.fetch(user)):
        if item.id == facility_id:
            return item
    return None
