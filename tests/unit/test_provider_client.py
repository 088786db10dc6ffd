"""Tests for provider clients against a mocked transport."""

import httpx
import pytest

from provider_client import (
    BusinessClient,
    GeocodeClient,
    MeetupClient,
    MovieClient,
    ProviderShapeMismatch,
    ProviderUnavailable,
    TrailClient,
    WeatherClient,
)


def transport(handler) -> httpx.MockTransport:
    return httpx.MockTransport(handler)


def json_handler(payload, status: int = 200, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status, json=payload)

    return handler


GEOCODE_PAYLOAD = {
    "status": "OK",
    "results": [
        {
            "formatted_address": "Beverly Hills, CA 90210, USA",
            "geometry": {"location": {"lat": 34.0901, "lng": -118.4065}},
        }
    ],
}


@pytest.mark.asyncio
class TestGeocodeClient:
    async def test_returns_first_result(self):
        seen = []
        async with GeocodeClient("geo-key", transport=transport(json_handler(GEOCODE_PAYLOAD, seen=seen))) as client:
            result = await client.geocode("90210")

        assert result.formatted_address == "Beverly Hills, CA 90210, USA"
        assert result.geometry.location.lat == 34.0901
        assert seen[0].url.params["address"] == "90210"
        assert seen[0].url.params["key"] == "geo-key"

    async def test_no_results(self):
        payload = {"status": "ZERO_RESULTS", "results": []}
        async with GeocodeClient(transport=transport(json_handler(payload))) as client:
            with pytest.raises(ProviderShapeMismatch):
                await client.geocode("nowhere at all")


@pytest.mark.asyncio
class TestResourceClients:
    async def test_weather_path(self):
        seen = []
        payload = {"daily": {"data": [{"time": 1514764800, "summary": "Clear"}]}}
        async with WeatherClient("sky-key", transport=transport(json_handler(payload, seen=seen))) as client:
            days = await client.daily(34.09, -118.4)

        assert [d.summary for d in days] == ["Clear"]
        assert seen[0].url.path.endswith("/sky-key/34.09,-118.4")

    async def test_business_bearer_auth(self):
        seen = []
        payload = {"businesses": [{"name": "Spago", "price": "$$$$", "rating": 4.5}]}
        async with BusinessClient("yelp-key", transport=transport(json_handler(payload, seen=seen))) as client:
            items = await client.search(34.09, -118.4)

        assert items[0].name == "Spago"
        assert seen[0].headers["Authorization"] == "Bearer yelp-key"
        assert seen[0].url.params["term"] == "restaurants"

    async def test_movie_search(self):
        payload = {"results": [{"title": "Clueless", "vote_average": 7.0}]}
        async with MovieClient(transport=transport(json_handler(payload))) as client:
            items = await client.search("90210")
        assert items[0].vote_average == 7.0

    async def test_meetup_list_payload(self):
        payload = [{"name": "LA Hikers", "created": 1514764800000, "organizer": {"name": "Sam"}}]
        async with MeetupClient(transport=transport(json_handler(payload))) as client:
            groups = await client.groups("90210")
        assert groups[0].organizer.name == "Sam"

    async def test_meetup_missing_organizer(self):
        payload = [{"name": "LA Hikers", "created": 1514764800000}]
        async with MeetupClient(transport=transport(json_handler(payload))) as client:
            with pytest.raises(ProviderShapeMismatch):
                await client.groups("90210")

    async def test_trail_aliases(self):
        payload = {"trails": [{"name": "Runyon Canyon", "starVotes": 120, "conditionStatus": "All Clear"}]}
        async with TrailClient(transport=transport(json_handler(payload))) as client:
            items = await client.trails(34.09, -118.4)
        assert items[0].star_votes == 120
        assert items[0].condition_status == "All Clear"


@pytest.mark.asyncio
class TestFailures:
    async def test_error_status_not_retried(self):
        async with WeatherClient(transport=transport(json_handler({"error": "nope"}, status=503))) as client:
            with pytest.raises(ProviderUnavailable):
                await client.daily(0.0, 0.0)
            assert client.request_count == 1

    async def test_connect_error_retried_then_unavailable(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with WeatherClient(transport=transport(handler)) as client:
            with pytest.raises(ProviderUnavailable):
                await client.daily(0.0, 0.0)
            assert client.request_count == 3

    async def test_non_json_body(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>maintenance</html>")

        async with MovieClient(transport=transport(handler)) as client:
            with pytest.raises(ProviderShapeMismatch):
                await client.search("90210")

    async def test_wrong_shape(self):
        async with WeatherClient(transport=transport(json_handler({"currently": {}}))) as client:
            with pytest.raises(ProviderShapeMismatch):
                await client.daily(0.0, 0.0)

    async def test_closed_client(self):
        client = WeatherClient()
        with pytest.raises(RuntimeError):
            await client.daily(0.0, 0.0)
