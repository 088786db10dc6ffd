"""Location (geocoded search query) model."""

from dataclasses import dataclass
from datetime import datetime

from app.models.common import BaseEntity

LOCATION_SEQUENCE_DDL = "CREATE SEQUENCE IF NOT EXISTS location_id_seq START 1"

LOCATION_DDL = """
CREATE TABLE IF NOT EXISTS locations (
    id INTEGER PRIMARY KEY DEFAULT nextval('location_id_seq'),
    search_query VARCHAR NOT NULL UNIQUE,
    formatted_query VARCHAR,
    latitude DOUBLE,
    longitude DOUBLE,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class Location(BaseEntity):
    """A geocoded place, created once per distinct search query."""

    search_query: str
    formatted_query: str | None
    latitude: float
    longitude: float
    id: int | None = None
    created_at: datetime | None = None
