"""Location repository - find-or-create geocoded search queries."""

from dataclasses import replace

from loguru import logger

from app.models import Location
from app.repositories.base import BaseRepository
from app.repositories.errors import QueryFailed

_COLUMNS = "id, search_query, formatted_query, latitude, longitude, created_at"


class LocationRepository(BaseRepository):
    """Repository for locations, unique per search query."""

    def find_by_query(self, query: str) -> Location | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM locations WHERE search_query = ?", [query])
        return Location(**row) if row else None

    def find_by_id(self, location_id: int) -> Location | None:
        row = self.fetchone(f"SELECT {_COLUMNS} FROM locations WHERE id = ?", [location_id])
        return Location(**row) if row else None

    def insert(self, location: Location) -> Location:
        """Insert a location, or resolve the stored one if the query already exists.

        ``ON CONFLICT DO NOTHING RETURNING`` yields no row on conflict, so the
        existing id is looked up instead of being left unset.
        """
        now = self._clock.now()
        row = self.fetchone(
            """
            INSERT INTO locations (search_query, formatted_query, latitude, longitude, created_at)
            VALUES (?, ?, ?, ?, ?)
            ON CONFLICT (search_query) DO NOTHING
            RETURNING id
            """,
            [location.search_query, location.formatted_query, location.latitude, location.longitude, now],
        )
        if row is not None:
            logger.info("Location saved: {!r} -> id={}", location.search_query, row["id"])
            return replace(location, id=row["id"], created_at=now)

        existing = self.find_by_query(location.search_query)
        if existing is None:
            raise QueryFailed(f"Location {location.search_query!r} neither inserted nor found")
        logger.debug("Location {!r} already stored as id={}", location.search_query, existing.id)
        return existing
