"""Business search API client."""

from provider_client.base import BaseClient
from provider_client.business.schemas import BusinessSchema, BusinessSearchSchema
from settings import YELP_URL


class BusinessClient(BaseClient):
    """Client for the Yelp Fusion business search API."""

    BASE_URL = YELP_URL

    async def search(self, latitude: float, longitude: float, term: str = "restaurants") -> list[BusinessSchema]:
        """GET /v3/businesses/search - businesses around a point."""
        payload = await self._get(
            self._base_url,
            params={"term": term, "latitude": latitude, "longitude": longitude},
            headers={"Authorization": f"Bearer {self._api_key}"},
        )
        return self._parse(BusinessSearchSchema, payload).businesses
