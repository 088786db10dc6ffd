"""Trails API client."""

from provider_client.base import BaseClient
from provider_client.trails.schemas import TrailSchema, TrailsResponseSchema
from settings import TRAILS_URL


class TrailClient(BaseClient):
    """Client for the Hiking Project trails API."""

    BASE_URL = TRAILS_URL

    async def trails(self, latitude: float, longitude: float, max_distance: int = 10) -> list[TrailSchema]:
        """GET /data/get-trails - trails within ``max_distance`` miles."""
        payload = await self._get(
            self._base_url,
            params={"lat": latitude, "lon": longitude, "maxDistance": max_distance, "key": self._api_key},
        )
        return self._parse(TrailsResponseSchema, payload).trails
