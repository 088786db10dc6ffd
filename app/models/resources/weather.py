"""Weather (daily forecast) model."""

from dataclasses import dataclass

from app.models.common import ResourceRecord

WEATHER_DDL = """
CREATE TABLE IF NOT EXISTS weathers (
    id BIGINT PRIMARY KEY DEFAULT nextval('record_id_seq'),
    location_id INTEGER NOT NULL REFERENCES locations(id),
    forecast VARCHAR,
    "time" VARCHAR,
    created_at TIMESTAMP NOT NULL
)
"""


@dataclass
class Weather(ResourceRecord):
    """One day of forecast."""

    TABLE = "weathers"

    forecast: str | None
    time: str
