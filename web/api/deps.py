"""Request dependencies."""

from fastapi import Query, Request

from app.container import Container
from app.models import Location
from app.services.aggregator import AggregatorService


def get_container(request: Request) -> Container:
    return request.app.state.container


def get_aggregator(request: Request) -> AggregatorService:
    return get_container(request).aggregator


def location_params(
    location_id: int = Query(alias="id"),
    latitude: float = Query(),
    longitude: float = Query(),
    search_query: str = Query(),
    formatted_query: str | None = Query(default=None),
) -> Location:
    """The location object previously returned by ``/location``, sent back as query params."""
    return Location(
        id=location_id,
        search_query=search_query,
        formatted_query=formatted_query,
        latitude=latitude,
        longitude=longitude,
    )
