"""
Shared test fixtures.

The API fixtures swap the facility source for a zero-latency synthetic
one so tests do not sleep, and expose the app so individual tests can
install their own dependency overrides.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.api.dependencies import get_facility_source
from src.domain.entities import Coordinate, Facility
from src.infrastructure.facility_source import SyntheticFacilitySource

ORIGIN = Coordinate(0.0, 0.0)
NEW_YORK = Coordinate(40.7128, -74.0060)


def make_facility(fid: str, lat: float, lng: float, **kwargs) -> Facility:
    return Facility(id=fid, name=f"Hospital {fid}", location=Coordinate(lat, lng), **kwargs)


# ── Fixtures ──────────────────────────────────────────────────────────


@pytest.fixture
def three_facilities() -> list[Facility]:
    """Offsets from the origin, deliberately not in distance order."""
    return [
        make_facility("a", 0.01, 0.01, has_emergency=True),
        make_facility("b", -0.008, 0.005),
        make_facility("c", 0.03, 0.025, has_emergency=True),
    ]


@pytest.fixture
def app() -> FastAPI:
    app = create_app()
    app.dependency_overrides[get_facility_source] = lambda: SyntheticFacilitySource(
        delay_seconds=0
    )
    return app


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
