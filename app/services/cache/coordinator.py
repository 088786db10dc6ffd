"""Cache-through coordinator - hit, miss or stale-evict per (kind, location)."""

import asyncio
from dataclasses import dataclass
from datetime import timedelta

from loguru import logger

from app.clock import Clock, SystemClock
from app.models import ResourceKind, ResourceRecord
from app.repositories.records import RecordRepository


@dataclass(frozen=True)
class Hit:
    """Fresh rows found in the store."""

    rows: list[ResourceRecord]


@dataclass(frozen=True)
class Miss:
    """Nothing usable stored; ``evicted`` rows were dropped as stale."""

    evicted: int = 0


LookupOutcome = Hit | Miss


class CacheCoordinator:
    """Decide whether a location's cached batch of a kind can be served.

    A batch is judged by the timestamp of its first row, since all rows of one
    refresh share it. A stale batch is deleted as a whole before ``Miss`` is
    returned, so the caller repopulates from scratch. No state is kept between
    calls.
    """

    def __init__(self, records: RecordRepository, clock: Clock | None = None):
        self._records = records
        self._clock = clock or SystemClock()

    async def lookup(
        self,
        kind: ResourceKind,
        location_id: int,
        ttl: timedelta | None = None,
    ) -> LookupOutcome:
        """Classify the stored batch, evicting it when older than ``ttl``."""
        ttl = kind.ttl if ttl is None else ttl
        rows = await asyncio.to_thread(self._records.find_by_location, kind, location_id)

        if not rows:
            logger.debug("Cache miss: {} location={}", kind.value, location_id)
            return Miss()

        age = self._clock.now() - rows[0].created_at
        if age > ttl:
            evicted = await asyncio.to_thread(self._records.delete_by_location, kind, location_id)
            logger.info(
                "Cache stale: {} location={} age={} ttl={} evicted={}",
                kind.value,
                location_id,
                age,
                ttl,
                evicted,
            )
            return Miss(evicted=evicted)

        logger.debug("Cache hit: {} location={} rows={}", kind.value, location_id, len(rows))
        return Hit(rows)
