"""Third-party provider API clients."""

from provider_client.base import BaseClient
from provider_client.business import BusinessClient
from provider_client.errors import ProviderError, ProviderShapeMismatch, ProviderUnavailable
from provider_client.geocode import GeocodeClient
from provider_client.meetups import MeetupClient
from provider_client.movies import MovieClient
from provider_client.trails import TrailClient
from provider_client.weather import WeatherClient

__all__ = [
    # Base
    "BaseClient",
    # Errors
    "ProviderError",
    "ProviderUnavailable",
    "ProviderShapeMismatch",
    # Clients
    "GeocodeClient",
    "WeatherClient",
    "BusinessClient",
    "MovieClient",
    "MeetupClient",
    "TrailClient",
]
