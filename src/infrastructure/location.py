"""
Location providers.

The browser owns the geolocation API, so by the time a request reaches
the backend the position fix (or the failure to get one) has already
happened client-side.  ``StaticLocationProvider`` turns that outcome
back into the one-shot async contract the search service expects.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from src.domain.entities import Coordinate
from src.domain.enums import LocationErrorKind
from src.domain.exceptions import LocationUnavailable


class LocationProvider(ABC):
    @abstractmethod
    async def locate(self) -> Coordinate:
        """Resolve the user's position or raise ``LocationUnavailable``."""


class StaticLocationProvider(LocationProvider):
    def __init__(
        self,
        coordinate: Optional[Coordinate],
        error: Optional[LocationErrorKind] = None,
    ):
        self.coordinate = coordinate
        self.error = error

    async def locate(self) -> Coordinate:
        if self.error is not None:
            raise LocationUnavailable(self.error)
        if self.coordinate is None:
            raise LocationUnavailable(LocationErrorKind.UNSUPPORTED)
        if not self.coordinate.is_valid():
            raise LocationUnavailable(
                LocationErrorKind.POSITION_UNAVAILABLE,
                f"({self.coordinate.latitude}, {self.coordinate.longitude}) is out of range",
            )
        return self.coordinate
