"""Record repository - location-scoped resource rows, one table per kind."""

from collections.abc import Sequence
from dataclasses import replace

from loguru import logger

from app.models import ResourceKind, ResourceRecord
from app.repositories.base import BaseRepository


def _quoted(names: Sequence[str]) -> str:
    return ", ".join(f'"{n}"' for n in names)


class RecordRepository(BaseRepository):
    """Insert, bulk delete and select resource rows by location."""

    def find_by_location(self, kind: ResourceKind, location_id: int) -> list[ResourceRecord]:
        """All rows of ``kind`` for a location, in insertion order."""
        record_type = kind.record_type
        columns = ["id", "location_id", "created_at", *record_type.columns()]
        rows = self.fetchall(
            f"SELECT {_quoted(columns)} FROM {kind.table} WHERE location_id = ? ORDER BY id",
            [location_id],
        )
        logger.debug("find_by_location({}, {}): {} rows", kind.value, location_id, len(rows))
        return [record_type(**row) for row in rows]

    def delete_by_location(self, kind: ResourceKind, location_id: int) -> int:
        """Remove every row of ``kind`` for a location. Returns the count deleted."""
        rows = self.fetchall(
            f"DELETE FROM {kind.table} WHERE location_id = ? RETURNING id",
            [location_id],
        )
        logger.debug("delete_by_location({}, {}): {} rows", kind.value, location_id, len(rows))
        return len(rows)

    def insert(self, kind: ResourceKind, location_id: int, record: ResourceRecord) -> ResourceRecord:
        """Append one row stamped with the current time."""
        with self.cursor() as cur:
            return self._insert(cur, kind, location_id, record, self._clock.now())

    def insert_batch(
        self,
        kind: ResourceKind,
        location_id: int,
        records: Sequence[ResourceRecord],
    ) -> list[ResourceRecord]:
        """Append a refresh batch atomically; every row shares one timestamp."""
        now = self._clock.now()
        with self.transaction() as cur:
            saved = [self._insert(cur, kind, location_id, r, now) for r in records]
        logger.info("Stored {} {} rows for location {}", len(saved), kind.value, location_id)
        return saved

    def _insert(self, cur, kind, location_id, record, created_at) -> ResourceRecord:
        if not isinstance(record, kind.record_type):
            raise TypeError(f"{type(record).__name__} is not a {kind.record_type.__name__} row")
        columns = ["location_id", "created_at", *record.columns()]
        placeholders = ", ".join("?" for _ in columns)
        rows = self._run(
            cur,
            f"INSERT INTO {kind.table} ({_quoted(columns)}) VALUES ({placeholders}) RETURNING id",
            [location_id, created_at, *record.values()],
        )
        return replace(record, id=rows[0]["id"], location_id=location_id, created_at=created_at)
