"""FastAPI dependency injection helpers."""

from src.config import settings
from src.infrastructure.facility_source import FacilitySource, SyntheticFacilitySource


def get_facility_source() -> FacilitySource:
    """Return the facility source used to answer nearby searches."""
    return SyntheticFacilitySource(
        delay_seconds=settings.facility_fetch_delay_seconds
    )
