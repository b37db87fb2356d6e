"""Pydantic response schemas for the REST API."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from src.domain.distance import format_distance
from src.domain.entities import RankedFacility


# ── Responses ─────────────────────────────────────────────────────────


class FacilityResponse(BaseModel):
    id: str
    name: str
    lat: float
    lng: float
    address: str
    phone: str
    has_emergency: bool
    distance_km: float
    distance_label: str

    @classmethod
    def from_ranked(cls, item: RankedFacility) -> "FacilityResponse":
        return cls(
            id=item.id,
            name=item.name,
            lat=item.location.latitude,
            lng=item.location.longitude,
            address=item.address,
            phone=item.phone,
            has_emergency=item.has_emergency,
            distance_km=item.distance_km,
            distance_label=format_distance(item.distance_km),
        )


class FacilityDetailResponse(FacilityResponse):
    phone_display: str
    emergency_label: str
    driving_directions_url: str
    walking_directions_url: str


class NearbyResponse(BaseModel):
    user_lat: float
    user_lng: float
    count: int
    selected_id: Optional[str] = None
    facilities: list[FacilityResponse] = []


class DistanceResponse(BaseModel):
    distance_km: float
    distance_label: str


class HealthResponse(BaseModel):
    status: str = "ok"


class ErrorResponse(BaseModel):
    detail: str
    kind: Optional[str] = None  # set for location failures
