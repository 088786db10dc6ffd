"""Location API."""

from web.api.location.views import get_location, router

__all__ = [
    "router",
    "get_location",
]
