"""
Domain entities.

``Facility`` is what a facility source produces: identity, descriptive
attributes and a location.  ``RankedFacility`` pairs a facility with its
distance from one particular user position; the distance is derived, so
a new ``RankedFacility`` is built whenever the user moves and the
underlying ``Facility`` is never modified.
"""

from __future__ import annotations

from dataclasses import dataclass


# ── Value Object ──────────────────────────────────────────────────────


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float

    def is_valid(self) -> bool:
        """True when both components lie within their degree ranges."""
        return -90.0 <= self.latitude <= 90.0 and -180.0 <= self.longitude <= 180.0


# ── Entities ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Facility:
    id: str
    name: str
    location: Coordinate
    address: str = ""
    phone: str = ""
    has_emergency: bool = False

    def with_distance(self, distance_km: float) -> RankedFacility:
        return RankedFacility(facility=self, distance_km=distance_km)


@dataclass(frozen=True)
class RankedFacility:
    facility: Facility
    distance_km: float

    @property
    def id(self) -> str:
        return self.facility.id

    @property
    def name(self) -> str:
        return self.facility.name

    @property
    def location(self) -> Coordinate:
        return self.facility.location

    @property
    def address(self) -> str:
        return self.facility.address

    @property
    def phone(self) -> str:
        return self.facility.phone

    @property
    def has_emergency(self) -> bool:
        return self.facility.has_emergency


RankedFacilityList = list[RankedFacility]
