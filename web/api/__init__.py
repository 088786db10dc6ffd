"""HTTP API - routers and error handling."""

from web.api.errors import GENERIC_ERROR_MESSAGE, register_error_handlers
from web.api.location import router as location_router
from web.api.resources import router as resources_router

__all__ = [
    "GENERIC_ERROR_MESSAGE",
    "register_error_handlers",
    "location_router",
    "resources_router",
]
