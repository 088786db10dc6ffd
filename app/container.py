"""Dependency Injection container - started and stopped with the app."""

import duckdb
import httpx
from loguru import logger

from app.clock import Clock, SystemClock
from app.repositories import LocationRepository, RecordRepository, close, connect
from app.services.aggregator import AggregatorService
from app.services.cache import CacheCoordinator, ResourceService
from provider_client import (
    BaseClient,
    BusinessClient,
    GeocodeClient,
    MeetupClient,
    MovieClient,
    TrailClient,
    WeatherClient,
)
from settings import (
    DARKSKY_API_KEY,
    DB_PATH,
    GEOCODE_API_KEY,
    MEETUP_API_KEY,
    MOVIE_API_KEY,
    TRAIL_API_KEY,
    YELP_API_KEY,
)


class Container:
    """Application DI container - owns the store connection and provider clients."""

    def __init__(
        self,
        db_path: str = DB_PATH,
        clock: Clock | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._db_path = db_path
        self._clock = clock or SystemClock()
        self._transport = transport
        self._db: duckdb.DuckDBPyConnection | None = None
        self._clients: list[BaseClient] = []
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    async def start(self) -> None:
        """Open the store and provider clients, then wire services. Call once at startup."""
        if self._started:
            return

        self._db = connect(self._db_path)

        # Repositories
        self.location_repo = LocationRepository(self._db, self._clock)
        self.record_repo = RecordRepository(self._db, self._clock)

        # Provider clients
        geocode = GeocodeClient(GEOCODE_API_KEY, transport=self._transport)
        weather = WeatherClient(DARKSKY_API_KEY, transport=self._transport)
        business = BusinessClient(YELP_API_KEY, transport=self._transport)
        movies = MovieClient(MOVIE_API_KEY, transport=self._transport)
        meetups = MeetupClient(MEETUP_API_KEY, transport=self._transport)
        trails = TrailClient(TRAIL_API_KEY, transport=self._transport)
        self._clients = [geocode, weather, business, movies, meetups, trails]
        for client in self._clients:
            await client.open()

        # Services (with injected repos and clients)
        self.coordinator = CacheCoordinator(self.record_repo, self._clock)
        self.resources = ResourceService(self.record_repo, self.coordinator)
        self.aggregator = AggregatorService(
            location_repo=self.location_repo,
            resources=self.resources,
            geocode_client=geocode,
            weather_client=weather,
            business_client=business,
            movie_client=movies,
            meetup_client=meetups,
            trail_client=trails,
        )

        self._started = True
        logger.info("Container started (db={})", self._db_path)

    async def stop(self) -> None:
        """Close provider clients and the store connection."""
        if not self._started:
            return
        for client in self._clients:
            await client.aclose()
        self._clients = []
        close(self._db)
        self._db = None
        self._started = False
        logger.info("Container stopped")


# Global container instance
container = Container()
