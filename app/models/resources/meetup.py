"""Meetup group model."""

from dataclasses import dataclass

from app.models.common import ResourceRecord

MEETUP_DDL = """
CREATE TABLE IF NOT EXISTS meetups (
    id BIGINT PRIMARY KEY DEFAULT nextval('record_id_seq'),
    location_id INTEGER NOT NULL REFERENCES locations(id),
    link VARCHAR,
    name VARCHAR,
    creation_date VARCHAR,
    host VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class Meetup(ResourceRecord):
    """A meetup group near the location."""

    TABLE = "meetups"

    link: str | None
    name: str
    creation_date: str
    host: str | None
