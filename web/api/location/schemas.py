"""Location API response schemas."""

from pydantic import BaseModel


class LocationResponse(BaseModel):
    """Resolved location."""

    id: int
    search_query: str
    formatted_query: str | None
    latitude: float
    longitude: float
