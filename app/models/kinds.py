"""Resource kinds - table, row type and freshness policy per provider."""

from datetime import timedelta
from enum import StrEnum

from app.models.common import ResourceRecord
from app.models.resources import Business, Meetup, Movie, Trail, Weather
from settings import BUSINESS_TTL, MEETUP_TTL, MOVIE_TTL, TRAIL_TTL, WEATHER_TTL


class ResourceKind(StrEnum):
    """Kinds of location-scoped resources served through the cache."""

    WEATHER = "weather"
    BUSINESS = "yelp"
    MOVIE = "movies"
    MEETUP = "meetups"
    TRAIL = "trails"

    @property
    def record_type(self) -> type[ResourceRecord]:
        return RECORD_TYPES[self]

    @property
    def table(self) -> str:
        return self.record_type.TABLE

    @property
    def ttl(self) -> timedelta:
        """Maximum age of a cached batch before it is refreshed."""
        return FRESHNESS[self]


RECORD_TYPES: dict[ResourceKind, type[ResourceRecord]] = {
    ResourceKind.WEATHER: Weather,
    ResourceKind.BUSINESS: Business,
    ResourceKind.MOVIE: Movie,
    ResourceKind.MEETUP: Meetup,
    ResourceKind.TRAIL: Trail,
}

FRESHNESS: dict[ResourceKind, timedelta] = {
    ResourceKind.WEATHER: WEATHER_TTL,
    ResourceKind.BUSINESS: BUSINESS_TTL,
    ResourceKind.MOVIE: MOVIE_TTL,
    ResourceKind.MEETUP: MEETUP_TTL,
    ResourceKind.TRAIL: TRAIL_TTL,
}
