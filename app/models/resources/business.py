"""Business listing (Yelp) model."""

from dataclasses import dataclass

from app.models.common import ResourceRecord

BUSINESS_DDL = """
CREATE TABLE IF NOT EXISTS yelps (
    id BIGINT PRIMARY KEY DEFAULT nextval('record_id_seq'),
    location_id INTEGER NOT NULL REFERENCES locations(id),
    name VARCHAR,
    image_url VARCHAR,
    price VARCHAR,
    rating DOUBLE,
    url VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class Business(ResourceRecord):
    """A restaurant near the location."""

    TABLE = "yelps"

    name: str
    image_url: str | None
    price: str | None
    rating: float | None
    url: str | None
