"""Geocoding API client."""

from provider_client.base import BaseClient
from provider_client.errors import ProviderShapeMismatch
from provider_client.geocode.schemas import GeocodeResponseSchema, GeocodeResultSchema
from settings import GEOCODE_URL


class GeocodeClient(BaseClient):
    """Client for the Google Geocoding API."""

    BASE_URL = GEOCODE_URL

    async def geocode(self, query: str) -> GeocodeResultSchema:
        """GET /geocode/json?address={query} - best match for a free-text query."""
        payload = await self._get(self._base_url, params={"address": query, "key": self._api_key})
        response = self._parse(GeocodeResponseSchema, payload)
        if not response.results:
            raise ProviderShapeMismatch(f"GeocodeClient: no results for {query!r} (status={response.status})")
        return response.results[0]
