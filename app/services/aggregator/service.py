"""Aggregator service - location resolution and per-provider resources."""

import asyncio

from loguru import logger

from app.models import Business, Location, Meetup, Movie, ResourceKind, Trail, Weather
from app.repositories.location import LocationRepository
from app.services.aggregator import normalize
from app.services.cache import KeyedLocks, ResourceService
from provider_client import (
    BusinessClient,
    GeocodeClient,
    MeetupClient,
    MovieClient,
    TrailClient,
    WeatherClient,
)


class AggregatorService:
    """Aggregator business logic.

    Every resource method takes the location returned by ``location()`` and
    serves that location's cached rows, refreshing them from the provider when
    missing or stale.
    """

    def __init__(
        self,
        location_repo: LocationRepository,
        resources: ResourceService,
        geocode_client: GeocodeClient,
        weather_client: WeatherClient,
        business_client: BusinessClient,
        movie_client: MovieClient,
        meetup_client: MeetupClient,
        trail_client: TrailClient,
    ):
        self._locations = location_repo
        self._resources = resources
        self._geocode = geocode_client
        self._weather = weather_client
        self._business = business_client
        self._movies = movie_client
        self._meetups = meetup_client
        self._trails = trail_client
        self._query_locks = KeyedLocks()

    async def location(self, query: str) -> Location:
        """Find the location for a search query, geocoding it on first use."""
        async with self._query_locks(query):
            found = await asyncio.to_thread(self._locations.find_by_query, query)
            if found is not None:
                logger.debug("Location hit: {!r} -> id={}", query, found.id)
                return found

            result = await self._geocode.geocode(query)
            return await asyncio.to_thread(self._locations.insert, normalize.location(query, result))

    async def weather(self, location: Location) -> list[Weather]:
        async def refresh():
            days = await self._weather.daily(location.latitude, location.longitude)
            return [normalize.weather(d) for d in days]

        return await self._resources.get(ResourceKind.WEATHER, location.id, refresh)

    async def businesses(self, location: Location) -> list[Business]:
        async def refresh():
            items = await self._business.search(location.latitude, location.longitude)
            return [normalize.business(b) for b in items]

        return await self._resources.get(ResourceKind.BUSINESS, location.id, refresh)

    async def movies(self, location: Location) -> list[Movie]:
        async def refresh():
            items = await self._movies.search(location.search_query)
            return [normalize.movie(m) for m in items]

        return await self._resources.get(ResourceKind.MOVIE, location.id, refresh)

    async def meetups(self, location: Location) -> list[Meetup]:
        async def refresh():
            groups = await self._meetups.groups(location.search_query)
            return [normalize.meetup(g) for g in groups]

        return await self._resources.get(ResourceKind.MEETUP, location.id, refresh)

    async def trails(self, location: Location) -> list[Trail]:
        async def refresh():
            items = await self._trails.trails(location.latitude, location.longitude)
            return [normalize.trail(t) for t in items]

        return await self._resources.get(ResourceKind.TRAIL, location.id, refresh)
