"""Tests for the nearby search service around the ranking core."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from src.domain.enums import LocationErrorKind
from src.domain.exceptions import FacilityRetrievalError, LocationUnavailable
from src.infrastructure.facility_source import SyntheticFacilitySource
from src.infrastructure.location import StaticLocationProvider
from src.services.finder import find_facility, find_nearby
from tests.conftest import ORIGIN

NEAREST_AT_ORIGIN = ["h2", "h1", "h4", "h3", "h5", "h6", "h7", "h8", "h10", "h9"]


class TestFindNearby:
    @pytest.mark.asyncio
    async def test_ranks_synthetic_hospitals(self):
        search = await find_nearby(StaticLocationProvider(ORIGIN), SyntheticFacilitySource())
        assert search.user == ORIGIN
        assert [f.id for f in search.facilities] == NEAREST_AT_ORIGIN
        assert search.selected.id == "h2"

    @pytest.mark.asyncio
    async def test_limit(self):
        search = await find_nearby(
            StaticLocationProvider(ORIGIN), SyntheticFacilitySource(), limit=3
        )
        assert [f.id for f in search.facilities] == ["h2", "h1", "h4"]

    @pytest.mark.asyncio
    async def test_emergency_only(self, three_facilities):
        source = AsyncMock()
        source.fetch = AsyncMock(return_value=three_facilities)
        search = await find_nearby(StaticLocationProvider(ORIGIN), source, emergency_only=True)
        assert [f.id for f in search.facilities] == ["a", "c"]
        source.fetch.assert_awaited_once_with(ORIGIN)

    @pytest.mark.asyncio
    async def test_keeps_selection(self):
        search = await find_nearby(
            StaticLocationProvider(ORIGIN), SyntheticFacilitySource(), selected_id="h9"
        )
        assert search.selected.id == "h9"

    @pytest.mark.asyncio
    async def test_empty_source(self):
        source = AsyncMock()
        source.fetch = AsyncMock(return_value=[])
        search = await find_nearby(StaticLocationProvider(ORIGIN), source)
        assert search.facilities == []
        assert search.selected is None

    @pytest.mark.asyncio
    async def test_retrieval_error_propagates(self):
        source = AsyncMock()
        source.fetch = AsyncMock(side_effect=FacilityRetrievalError("upstream down"))
        with pytest.raises(FacilityRetrievalError):
            await find_nearby(StaticLocationProvider(ORIGIN), source)

    @pytest.mark.asyncio
    async def test_location_error_skips_fetch(self):
        source = AsyncMock()
        locator = StaticLocationProvider(None, error=LocationErrorKind.TIMEOUT)
        with pytest.raises(LocationUnavailable):
            await find_nearby(locator, source)
        source.fetch.assert_not_called()

    @pytest.mark.asyncio
    async def test_concurrent_searches_are_independent(self):
        source = SyntheticFacilitySource()
        results = await asyncio.gather(
            *(find_nearby(StaticLocationProvider(ORIGIN), source) for _ in range(5))
        )
        assert all(r.facilities == results[0].facilities for r in results)


class TestFindFacility:
    @pytest.mark.asyncio
    async def test_found(self):
        item = await find_facility(StaticLocationProvider(ORIGIN), SyntheticFacilitySource(), "h5")
        assert item.name == "NewYork-Presbyterian Hospital"
        assert item.distance_km > 0

    @pytest.mark.asyncio
    async def test_missing(self):
        item = await find_facility(StaticLocationProvider(ORIGIN), SyntheticFacilitySource(), "h99")
        assert item is None
