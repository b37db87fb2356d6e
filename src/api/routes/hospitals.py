"""
Hospital endpoints
==================

GET /api/v1/hospitals/nearby         -- hospitals ranked by distance from the user
GET /api/v1/hospitals/{facility_id}  -- one hospital with distance and directions

Both take the position fix the client got from its browser (``lat`` /
``lng``).  When geolocation failed client-side the client sends the
failure as ``error`` instead, and the request is answered with 422 and
that ``kind``; a request with neither is treated as UNSUPPORTED.
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from src.api.dependencies import get_facility_source
from src.api.middleware import limiter
from src.api.schemas import (
    ErrorResponse,
    FacilityDetailResponse,
    FacilityResponse,
    NearbyResponse,
)
from src.config import settings
from src.domain.directions import directions_url
from src.domain.entities import Coordinate
from src.domain.enums import LocationErrorKind, TravelMode
from src.infrastructure.facility_source import FacilitySource
from src.infrastructure.location import StaticLocationProvider
from src.services.finder import find_facility, find_nearby

router = APIRouter(prefix="/hospitals", tags=["hospitals"])

_ERROR_RESPONSES = {
    422: {"description": "No usable position fix (includes ``kind``)."},
    502: {"model": ErrorResponse, "description": "Facility source failed."},
}


def _locator(
    lat: Optional[float],
    lng: Optional[float],
    error: Optional[LocationErrorKind],
) -> StaticLocationProvider:
    fix = Coordinate(lat, lng) if lat is not None and lng is not None else None
    return StaticLocationProvider(fix, error=error)


@router.get(
    "/nearby",
    response_model=NearbyResponse,
    summary="List hospitals nearest first",
    description=(
        "Ranks hospitals around the given position by great-circle "
        "distance.  ``selected_id`` is kept as the selection while it is "
        "still in the list; otherwise the nearest hospital is selected."
    ),
    responses=_ERROR_RESPONSES,
)
@limiter.limit(settings.rate_limit)
async def nearby_hospitals(
    request: Request,
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lng: Optional[float] = Query(None, ge=-180, le=180),
    error: Optional[LocationErrorKind] = None,
    limit: Optional[int] = Query(None, ge=1, le=settings.max_result_limit),
    emergency_only: bool = False,
    selected_id: Optional[str] = None,
    source: FacilitySource = Depends(get_facility_source),
):
    search = await find_nearby(
        _locator(lat, lng, error),
        source,
        limit=limit or settings.default_result_limit,
        emergency_only=emergency_only,
        selected_id=selected_id,
    )
    return NearbyResponse(
        user_lat=search.user.latitude,
        user_lng=search.user.longitude,
        count=len(search.facilities),
        selected_id=search.selected.id if search.selected else None,
        facilities=[FacilityResponse.from_ranked(f) for f in search.facilities],
    )


@router.get(
    "/{facility_id}",
    response_model=FacilityDetailResponse,
    summary="Get hospital details and directions",
    responses={
        404: {"model": ErrorResponse, "description": "Unknown hospital id."},
        **_ERROR_RESPONSES,
    },
)
@limiter.limit(settings.rate_limit)
async def get_hospital(
    request: Request,
    facility_id: str,
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lng: Optional[float] = Query(None, ge=-180, le=180),
    error: Optional[LocationErrorKind] = None,
    source: FacilitySource = Depends(get_facility_source),
):
    item = await find_facility(_locator(lat, lng, error), source, facility_id)
    if not item:
        raise HTTPException(status_code=404, detail="Hospital not found")

    return FacilityDetailResponse(
        **FacilityResponse.from_ranked(item).model_dump(),
        phone_display=item.phone or "Not available",
        emergency_label="Available 24/7" if item.has_emergency else "Call to confirm",
        driving_directions_url=directions_url(item.location, TravelMode.DRIVING),
        walking_directions_url=directions_url(item.location, TravelMode.WALKING),
    )
