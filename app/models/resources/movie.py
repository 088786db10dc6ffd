"""Movie summary (TMDB) model."""

from dataclasses import dataclass

from app.models.common import ResourceRecord

MOVIE_DDL = """
CREATE TABLE IF NOT EXISTS movies (
    id BIGINT PRIMARY KEY DEFAULT nextval('record_id_seq'),
    location_id INTEGER NOT NULL REFERENCES locations(id),
    title VARCHAR,
    overview VARCHAR,
    average_votes DOUBLE,
    total_votes INTEGER,
    image_url VARCHAR,
    popularity DOUBLE,
    released_on VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class Movie(ResourceRecord):
    """A movie matching the location's search query."""

    TABLE = "movies"

    title: str
    overview: str | None
    average_votes: float | None
    total_votes: int | None
    image_url: str | None
    popularity: float | None
    released_on: str | None
