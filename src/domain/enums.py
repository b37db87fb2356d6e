"""Domain enumerations."""

import enum


class TravelMode(str, enum.Enum):
    DRIVING = "driving"
    WALKING = "walking"


class LocationErrorKind(str, enum.Enum):
    PERMISSION_DENIED = "PERMISSION_DENIED"
    POSITION_UNAVAILABLE = "POSITION_UNAVAILABLE"
    TIMEOUT = "TIMEOUT"
    UNSUPPORTED = "UNSUPPORTED"


# User-facing wording for each location failure
LOCATION_ERROR_MESSAGES: dict[LocationErrorKind, str] = {
    LocationErrorKind.PERMISSION_DENIED: "Location permission was denied",
    LocationErrorKind.POSITION_UNAVAILABLE: "Your position is unavailable",
    LocationErrorKind.TIMEOUT: "Timed out while getting your location",
    LocationErrorKind.UNSUPPORTED: "Geolocation is not supported by your browser",
}
