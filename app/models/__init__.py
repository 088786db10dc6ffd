"""Models package - DDL and entities for locations and resources."""

from app.models.common import BaseEntity, ResourceRecord
from app.models.kinds import FRESHNESS, ResourceKind
from app.models.location import LOCATION_DDL, LOCATION_SEQUENCE_DDL, Location
from app.models.resources import (
    BUSINESS_DDL,
    MEETUP_DDL,
    MOVIE_DDL,
    RECORD_SEQUENCE_DDL,
    TRAIL_DDL,
    WEATHER_DDL,
    Business,
    Meetup,
    Movie,
    Trail,
    Weather,
)

ALL_DDL = [
    # Locations
    LOCATION_SEQUENCE_DDL,
    LOCATION_DDL,
    # Resources
    RECORD_SEQUENCE_DDL,
    WEATHER_DDL,
    BUSINESS_DDL,
    MOVIE_DDL,
    MEETUP_DDL,
    TRAIL_DDL,
]

__all__ = [
    # Common
    "BaseEntity",
    "ResourceRecord",
    # Kinds
    "ResourceKind",
    "FRESHNESS",
    # Locations
    "LOCATION_SEQUENCE_DDL",
    "LOCATION_DDL",
    "Location",
    # Resources
    "RECORD_SEQUENCE_DDL",
    "WEATHER_DDL",
    "BUSINESS_DDL",
    "MOVIE_DDL",
    "MEETUP_DDL",
    "TRAIL_DDL",
    "Weather",
    "Business",
    "Movie",
    "Meetup",
    "Trail",
    # All DDL
    "ALL_DDL",
]
