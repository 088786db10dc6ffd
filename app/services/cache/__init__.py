"""Cache-through lookup of location-scoped resources."""

from app.services.cache.coordinator import CacheCoordinator, Hit, LookupOutcome, Miss
from app.services.cache.resources import KeyedLocks, Refresh, ResourceService

__all__ = [
    "CacheCoordinator",
    "Hit",
    "Miss",
    "LookupOutcome",
    "KeyedLocks",
    "Refresh",
    "ResourceService",
]
