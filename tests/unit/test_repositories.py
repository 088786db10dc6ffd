"""Tests for location and record repositories."""

import pytest

from app.models import Business, Location, ResourceKind, Weather
from app.repositories import QueryFailed, StoreUnavailable


def weather_rows(n: int) -> list[Weather]:
    return [Weather(forecast=f"Day {i}", time=f"Mon Jan 0{i + 1} 2024") for i in range(n)]


class TestLocationRepository:
    def test_first_insert_gets_id_one(self, location):
        assert location.id == 1
        assert location.formatted_query == "Beverly Hills, CA"
        assert location.created_at is not None

    def test_duplicate_query_resolves_existing_id(self, location_repo, location):
        again = location_repo.insert(
            Location(search_query="90210", formatted_query="Somewhere else", latitude=0.0, longitude=0.0)
        )

        assert again.id == location.id
        assert again.formatted_query == "Beverly Hills, CA"
        assert location_repo.fetchone("SELECT COUNT(*) AS n FROM locations")["n"] == 1

    def test_distinct_queries_get_distinct_ids(self, location_repo, location):
        other = location_repo.insert(
            Location(search_query="seattle", formatted_query="Seattle, WA", latitude=47.6, longitude=-122.3)
        )
        assert other.id != location.id

    def test_find_by_query(self, location_repo, location):
        assert location_repo.find_by_query("90210") == location
        assert location_repo.find_by_query("nowhere") is None

    def test_find_by_id(self, location_repo, location):
        assert location_repo.find_by_id(location.id).search_query == "90210"
        assert location_repo.find_by_id(999) is None


class TestRecordRepository:
    def test_find_empty(self, record_repo, location):
        assert record_repo.find_by_location(ResourceKind.WEATHER, location.id) == []

    def test_insert_stamps_clock_time(self, record_repo, location, clock):
        saved = record_repo.insert(ResourceKind.WEATHER, location.id, Weather(forecast="Sunny", time="Mon Jan 01 2024"))

        assert saved.id is not None
        assert saved.location_id == location.id
        assert saved.created_at == clock.now()

    def test_find_returns_insertion_order(self, record_repo, location):
        for row in weather_rows(3):
            record_repo.insert(ResourceKind.WEATHER, location.id, row)

        found = record_repo.find_by_location(ResourceKind.WEATHER, location.id)
        assert [r.forecast for r in found] == ["Day 0", "Day 1", "Day 2"]
        assert all(isinstance(r, Weather) for r in found)

    def test_duplicates_allowed(self, record_repo, location):
        row = Weather(forecast="Sunny", time="Mon Jan 01 2024")
        record_repo.insert(ResourceKind.WEATHER, location.id, row)
        record_repo.insert(ResourceKind.WEATHER, location.id, row)
        assert len(record_repo.find_by_location(ResourceKind.WEATHER, location.id)) == 2

    def test_batch_shares_one_timestamp(self, record_repo, location):
        saved = record_repo.insert_batch(ResourceKind.WEATHER, location.id, weather_rows(4))

        assert len(saved) == 4
        assert len({r.created_at for r in saved}) == 1
        assert len({r.id for r in saved}) == 4

    def test_empty_batch(self, record_repo, location):
        assert record_repo.insert_batch(ResourceKind.WEATHER, location.id, []) == []

    def test_delete_returns_count(self, record_repo, location):
        record_repo.insert_batch(ResourceKind.WEATHER, location.id, weather_rows(3))

        assert record_repo.delete_by_location(ResourceKind.WEATHER, location.id) == 3
        assert record_repo.find_by_location(ResourceKind.WEATHER, location.id) == []

    def test_delete_nothing_is_noop(self, record_repo, location):
        assert record_repo.delete_by_location(ResourceKind.TRAIL, location.id) == 0

    def test_delete_scoped_to_kind_and_location(self, record_repo, location_repo, location):
        other = location_repo.insert(
            Location(search_query="seattle", formatted_query="Seattle, WA", latitude=47.6, longitude=-122.3)
        )
        record_repo.insert_batch(ResourceKind.WEATHER, location.id, weather_rows(2))
        record_repo.insert_batch(ResourceKind.WEATHER, other.id, weather_rows(2))
        record_repo.insert(
            ResourceKind.BUSINESS,
            location.id,
            Business(name="Spago", image_url=None, price="$$$$", rating=4.5, url=None),
        )

        record_repo.delete_by_location(ResourceKind.WEATHER, location.id)

        assert len(record_repo.find_by_location(ResourceKind.WEATHER, other.id)) == 2
        assert len(record_repo.find_by_location(ResourceKind.BUSINESS, location.id)) == 1

    def test_wrong_row_type_rejected(self, record_repo, location):
        with pytest.raises(TypeError):
            record_repo.insert_batch(ResourceKind.BUSINESS, location.id, weather_rows(1))
        assert record_repo.find_by_location(ResourceKind.BUSINESS, location.id) == []

    def test_unknown_location_rejected(self, record_repo, location):
        with pytest.raises(QueryFailed):
            record_repo.insert(ResourceKind.WEATHER, 999, weather_rows(1)[0])


class TestStoreErrors:
    def test_bad_query(self, record_repo):
        with pytest.raises(QueryFailed):
            record_repo.fetchall("SELECT * FROM no_such_table")

    def test_closed_connection(self, db, record_repo, location):
        db.close()
        with pytest.raises(StoreUnavailable):
            record_repo.find_by_location(ResourceKind.WEATHER, location.id)
