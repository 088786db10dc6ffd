"""Resource models - one table per provider payload, keyed by location."""

from app.models.resources.business import BUSINESS_DDL, Business
from app.models.resources.meetup import MEETUP_DDL, Meetup
from app.models.resources.movie import MOVIE_DDL, Movie
from app.models.resources.trail import TRAIL_DDL, Trail
from app.models.resources.weather import WEATHER_DDL, Weather

RECORD_SEQUENCE_DDL = "CREATE SEQUENCE IF NOT EXISTS record_id_seq START 1"

__all__ = [
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
]
