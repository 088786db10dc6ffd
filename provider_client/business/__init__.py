"""Business search API client."""

from provider_client.business.client import BusinessClient
from provider_client.business.schemas import BusinessSchema, BusinessSearchSchema

__all__ = [
    "BusinessClient",
    "BusinessSchema",
    "BusinessSearchSchema",
]
