"""Exceptions raised by the collaborators around the ranking core."""

from __future__ import annotations

from .enums import LOCATION_ERROR_MESSAGES, LocationErrorKind


class HospitalFinderError(Exception):
    """Base class for all hospital-finder errors."""


class LocationUnavailable(HospitalFinderError):
    """Raised when the user's position cannot be determined."""

    def __init__(self, kind: LocationErrorKind, detail: str | None = None):
        self.kind = kind
        message = LOCATION_ERROR_MESSAGES[kind]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


class FacilityRetrievalError(HospitalFinderError):
    """Raised when the facility source fails to return results."""
