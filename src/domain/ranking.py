"""
Ranking Pipeline
================

1. **Annotate** -- compute each facility's Haversine distance from the
   user and attach it (``Facility.with_distance``).
2. **Sort**     -- order ascending by distance.

NaN policy
----------
A malformed coordinate yields a NaN distance, which does not compare
with anything.  Such entries are sorted *last*; ``sorted`` is stable, so
several NaN entries keep their input order and the output stays
deterministic.

Complexity: O(n log n) for n facilities.  The pipeline is pure: it keeps
no state between calls and may run concurrently.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional

from .distance import distance
from .entities import Coordinate, Facility, RankedFacility, RankedFacilityList


def _sort_key(item: RankedFacility) -> tuple[bool, float]:
    d = item.distance_km
    if math.isnan(d):
        return (True, 0.0)
    return (False, d)


def rank(user: Coordinate, facilities: Iterable[Facility]) -> RankedFacilityList:
    """Return *facilities* annotated with their distance and sorted nearest first."""
    annotated = [f.with_distance(distance(user, f.location)) for f in facilities]
    return sorted(annotated, key=_sort_key)


def select_default(
    ranked: RankedFacilityList, selected_id: Optional[str] = None
) -> Optional[RankedFacility]:
    """
    Resolve which facility should be shown as selected.

    The caller's current selection wins while it is still in *ranked*;
    otherwise the nearest facility is picked.  ``None`` for an empty list.
    """
    if selected_id is not None:
        for item in ranked:
            if item.id == selected_id:
                return item
    return ranked[0] if ranked else None
