"""Shared fixtures: in-memory store and a controllable clock."""

from datetime import datetime, timedelta

import pytest

from app.models import Location
from app.repositories import LocationRepository, RecordRepository, close, connect


class ManualClock:
    """Clock that only moves when told to."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, 12, 0, 0)):
        self._now = start

    def now(self) -> datetime:
        return self._now

    def advance(self, **kwargs) -> None:
        self._now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return ManualClock()


@pytest.fixture
def db():
    conn = connect(":memory:")
    yield conn
    close(conn)


@pytest.fixture
def location_repo(db, clock):
    return LocationRepository(db, clock)


@pytest.fixture
def record_repo(db, clock):
    return RecordRepository(db, clock)


@pytest.fixture
def location(location_repo):
    """The 90210 location, stored with id 1."""
    return location_repo.insert(
        Location(
            search_query="90210",
            formatted_query="Beverly Hills, CA",
            latitude=34.09,
            longitude=-118.4,
        )
    )
