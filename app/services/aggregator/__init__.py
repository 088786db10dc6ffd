"""Aggregator - fan-out from a location to each provider."""

from app.services.aggregator import normalize
from app.services.aggregator.service import AggregatorService

__all__ = [
    "AggregatorService",
    "normalize",
]
