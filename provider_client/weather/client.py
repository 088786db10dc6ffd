"""Weather forecast API client."""

from provider_client.base import BaseClient
from provider_client.weather.schemas import DailyDataSchema, ForecastSchema
from settings import DARKSKY_URL


class WeatherClient(BaseClient):
    """Client for the Dark Sky forecast API."""

    BASE_URL = DARKSKY_URL

    async def daily(self, latitude: float, longitude: float) -> list[DailyDataSchema]:
        """GET /forecast/{key}/{lat},{lng} - daily forecast entries."""
        payload = await self._get(f"{self._base_url}/{self._api_key}/{latitude},{longitude}")
        return self._parse(ForecastSchema, payload).daily.data
