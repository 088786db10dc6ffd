"""Resource API."""

from web.api.resources.views import (
    get_businesses,
    get_meetups,
    get_movies,
    get_trails,
    get_weather,
    router,
)

__all__ = [
    "router",
    "get_weather",
    "get_businesses",
    "get_movies",
    "get_meetups",
    "get_trails",
]
