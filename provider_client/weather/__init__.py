"""Weather forecast API client."""

from provider_client.weather.client import WeatherClient
from provider_client.weather.schemas import DailyDataSchema, ForecastSchema

__all__ = [
    "WeatherClient",
    "DailyDataSchema",
    "ForecastSchema",
]
