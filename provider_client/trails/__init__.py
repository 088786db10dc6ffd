"""Trails API client."""

from provider_client.trails.client import TrailClient
from provider_client.trails.schemas import TrailSchema, TrailsResponseSchema

__all__ = [
    "TrailClient",
    "TrailSchema",
    "TrailsResponseSchema",
]
