"""Location API views - thin layer over services."""

from fastapi import APIRouter, Depends, Query

from app.services.aggregator import AggregatorService
from web.api.deps import get_aggregator

from .schemas import LocationResponse

router = APIRouter(tags=["location"])


@router.get("/location", response_model=LocationResponse)
async def get_location(
    query: str = Query(alias="data", min_length=1),
    aggregator: AggregatorService = Depends(get_aggregator),
) -> LocationResponse:
    """Resolve a free-text search query to a stored location."""
    location = await aggregator.location(query)

    return LocationResponse(
        id=location.id,
        search_query=location.search_query,
        formatted_query=location.formatted_query,
        latitude=location.latitude,
        longitude=location.longitude,
    )
