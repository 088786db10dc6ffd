"""Geocoding API client."""

from provider_client.geocode.client import GeocodeClient
from provider_client.geocode.schemas import GeocodeResponseSchema, GeocodeResultSchema

__all__ = [
    "GeocodeClient",
    "GeocodeResponseSchema",
    "GeocodeResultSchema",
]
