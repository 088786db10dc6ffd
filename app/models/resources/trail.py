"""Trail (Hiking Project) model."""

from dataclasses import dataclass

from app.models.common import ResourceRecord

TRAIL_DDL = """
CREATE TABLE IF NOT EXISTS trails (
    id BIGINT PRIMARY KEY DEFAULT nextval('record_id_seq'),
    location_id INTEGER NOT NULL REFERENCES locations(id),
    name VARCHAR,
    location VARCHAR,
    length DOUBLE,
    stars DOUBLE,
    star_votes INTEGER,
    summary VARCHAR,
    trail_url VARCHAR,
    conditions VARCHAR,
    condition_date VARCHAR,
    condition_time VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class Trail(ResourceRecord):
    """A hiking trail near the location."""

    TABLE = "trails"

    name: str
    location: str | None
    length: float | None
    stars: float | None
    star_votes: int | None
    summary: str | None
    trail_url: str | None
    conditions: str | None
    condition_date: str | None
    condition_time: str | None
