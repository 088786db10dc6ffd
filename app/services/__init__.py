"""Services package - service class exports."""

from app.services.aggregator import AggregatorService
from app.services.cache import CacheCoordinator, Hit, LookupOutcome, Miss, ResourceService

__all__ = [
    "AggregatorService",
    "CacheCoordinator",
    "Hit",
    "Miss",
    "LookupOutcome",
    "ResourceService",
]
