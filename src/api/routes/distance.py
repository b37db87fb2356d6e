"""
Distance endpoint
=================

GET /api/v1/distance -- great-circle distance between two points
"""

from fastapi import APIRouter, Query, Request

from src.api.middleware import limiter
from src.api.schemas import DistanceResponse
from src.config import settings
from src.domain.distance import format_distance, haversine_km

router = APIRouter(prefix="/distance", tags=["distance"])


@router.get("", response_model=DistanceResponse, summary="Distance between two points")
@limiter.limit(settings.rate_limit)
async def get_distance(
    request: Request,
    from_lat: float = Query(..., ge=-90, le=90),
    from_lng: float = Query(..., ge=-180, le=180),
    to_lat: float = Query(..., ge=-90, le=90),
    to_lng: float = Query(..., ge=-180, le=180),
):
    km = haversine_km(from_lat, from_lng, to_lat, to_lng)
    return DistanceResponse(distance_km=km, distance_label=format_distance(km))
