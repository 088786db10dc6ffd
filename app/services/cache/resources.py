"""Resource service - serve cached batches or refresh them from a provider."""

import asyncio
from collections.abc import Awaitable, Callable, Hashable, Sequence
from datetime import timedelta
from weakref import WeakValueDictionary

from loguru import logger

from app.models import ResourceKind, ResourceRecord
from app.repositories.records import RecordRepository
from app.services.cache.coordinator import CacheCoordinator, Hit

Refresh = Callable[[], Awaitable[Sequence[ResourceRecord]]]


class KeyedLocks:
    """One asyncio lock per key, dropped once nobody holds or awaits it."""

    def __init__(self):
        self._locks: WeakValueDictionary[Hashable, asyncio.Lock] = WeakValueDictionary()

    def __call__(self, key: Hashable) -> asyncio.Lock:
        lock = self._locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._locks[key] = lock
        return lock


class ResourceService:
    """Cache-through access to location-scoped resources.

    Lookup and refresh for one (kind, location) run under a shared lock, so
    concurrent callers wait for the in-flight refresh and then read its rows
    instead of fetching the provider again.
    """

    def __init__(self, records: RecordRepository, coordinator: CacheCoordinator):
        self._records = records
        self._coordinator = coordinator
        self._locks = KeyedLocks()
        logger.debug("ResourceService initialized")

    async def get(
        self,
        kind: ResourceKind,
        location_id: int,
        refresh: Refresh,
        ttl: timedelta | None = None,
    ) -> list[ResourceRecord]:
        """Stored rows when fresh, otherwise the rows produced by ``refresh``."""
        async with self._locks((kind, location_id)):
            outcome = await self._coordinator.lookup(kind, location_id, ttl)
            if isinstance(outcome, Hit):
                return outcome.rows

            records = await refresh()
            return await asyncio.to_thread(self._records.insert_batch, kind, location_id, records)
