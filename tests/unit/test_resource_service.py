"""Tests for cache-through resource access with refresh serialization."""

import asyncio

import pytest

from app.models import Location, ResourceKind, Weather
from app.services.cache import CacheCoordinator, ResourceService
from provider_client import ProviderUnavailable


class CountingRefresh:
    """Refresh continuation that records how often it ran."""

    def __init__(self, rows: int = 3, delay: float = 0.0):
        self.calls = 0
        self._rows = rows
        self._delay = delay

    async def __call__(self) -> list[Weather]:
        self.calls += 1
        if self._delay:
            await asyncio.sleep(self._delay)
        return [Weather(forecast=f"Call {self.calls} day {i}", time="Mon Jan 01 2024") for i in range(self._rows)]


@pytest.fixture
def service(record_repo, clock):
    return ResourceService(record_repo, CacheCoordinator(record_repo, clock))


@pytest.mark.asyncio
class TestResourceService:
    async def test_miss_refreshes_and_stores(self, service, record_repo, location):
        refresh = CountingRefresh()

        rows = await service.get(ResourceKind.WEATHER, location.id, refresh)

        assert refresh.calls == 1
        assert len(rows) == 3
        assert record_repo.find_by_location(ResourceKind.WEATHER, location.id) == rows

    async def test_fresh_rows_served_without_refresh(self, service, location, clock):
        refresh = CountingRefresh()
        first = await service.get(ResourceKind.WEATHER, location.id, refresh)
        clock.advance(seconds=5)

        second = await service.get(ResourceKind.WEATHER, location.id, refresh)

        assert refresh.calls == 1
        assert second == first

    async def test_stale_rows_replaced(self, service, record_repo, location, clock):
        refresh = CountingRefresh()
        first = await service.get(ResourceKind.WEATHER, location.id, refresh)
        clock.advance(seconds=16)

        second = await service.get(ResourceKind.WEATHER, location.id, refresh)

        assert refresh.calls == 2
        assert {r.id for r in first}.isdisjoint({r.id for r in second})
        assert record_repo.find_by_location(ResourceKind.WEATHER, location.id) == second

    async def test_concurrent_callers_share_one_refresh(self, service, record_repo, location):
        refresh = CountingRefresh(delay=0.05)

        results = await asyncio.gather(
            *(service.get(ResourceKind.WEATHER, location.id, refresh) for _ in range(5))
        )

        assert refresh.calls == 1
        assert all(r == results[0] for r in results)
        assert len(record_repo.find_by_location(ResourceKind.WEATHER, location.id)) == 3

    async def test_concurrent_callers_share_one_refresh_after_eviction(self, service, record_repo, location, clock):
        await service.get(ResourceKind.WEATHER, location.id, CountingRefresh())
        clock.advance(seconds=16)
        refresh = CountingRefresh(delay=0.05)

        results = await asyncio.gather(
            *(service.get(ResourceKind.WEATHER, location.id, refresh) for _ in range(5))
        )

        assert refresh.calls == 1
        assert all(r == results[0] for r in results)
        assert record_repo.find_by_location(ResourceKind.WEATHER, location.id) == results[0]

    async def test_different_locations_refresh_independently(self, service, location_repo, location):
        other = location_repo.insert(
            Location(search_query="seattle", formatted_query="Seattle, WA", latitude=47.6, longitude=-122.3)
        )
        refresh = CountingRefresh(delay=0.01)

        await asyncio.gather(
            service.get(ResourceKind.WEATHER, location.id, refresh),
            service.get(ResourceKind.WEATHER, other.id, refresh),
        )

        assert refresh.calls == 2

    async def test_provider_failure_stores_nothing(self, service, record_repo, location):
        async def failing():
            raise ProviderUnavailable("WeatherClient: HTTP 503")

        with pytest.raises(ProviderUnavailable):
            await service.get(ResourceKind.WEATHER, location.id, failing)

        assert record_repo.find_by_location(ResourceKind.WEATHER, location.id) == []

    async def test_empty_refresh_stays_a_miss(self, service, location):
        refresh = CountingRefresh(rows=0)

        assert await service.get(ResourceKind.WEATHER, location.id, refresh) == []
        assert await service.get(ResourceKind.WEATHER, location.id, refresh) == []
        assert refresh.calls == 2
