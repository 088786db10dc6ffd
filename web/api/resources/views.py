"""Resource API views - thin layer over services."""

from fastapi import APIRouter, Depends

from app.models import Location
from app.services.aggregator import AggregatorService
from web.api.deps import get_aggregator, location_params

from .schemas import BusinessItem, MeetupItem, MovieItem, TrailItem, WeatherItem

router = APIRouter(tags=["resources"])


@router.get("/weather", response_model=list[WeatherItem])
async def get_weather(
    location: Location = Depends(location_params),
    aggregator: AggregatorService = Depends(get_aggregator),
) -> list[WeatherItem]:
    """Daily forecasts for a location."""
    rows = await aggregator.weather(location)
    return [WeatherItem(forecast=r.forecast, time=r.time) for r in rows]


@router.get("/yelp", response_model=list[BusinessItem])
async def get_businesses(
    location: Location = Depends(location_params),
    aggregator: AggregatorService = Depends(get_aggregator),
) -> list[BusinessItem]:
    """Restaurants around a location."""
    rows = await aggregator.businesses(location)
    return [
        BusinessItem(
            name=r.name,
            image_url=r.image_url,
            price=r.price,
            rating=r.rating,
            url=r.url,
        )
        for r in rows
    ]


@router.get("/movies", response_model=list[MovieItem])
async def get_movies(
    location: Location = Depends(location_params),
    aggregator: AggregatorService = Depends(get_aggregator),
) -> list[MovieItem]:
    """Movies matching a location's search query."""
    rows = await aggregator.movies(location)
    return [MovieItem.model_validate(r.to_dict()) for r in rows]


@router.get("/meetups", response_model=list[MeetupItem])
async def get_meetups(
    location: Location = Depends(location_params),
    aggregator: AggregatorService = Depends(get_aggregator),
) -> list[MeetupItem]:
    """Meetup groups near a location."""
    rows = await aggregator.meetups(location)
    return [MeetupItem.model_validate(r.to_dict()) for r in rows]


@router.get("/trails", response_model=list[TrailItem])
async def get_trails(
    location: Location = Depends(location_params),
    aggregator: AggregatorService = Depends(get_aggregator),
) -> list[TrailItem]:
    """Hiking trails near a location."""
    rows = await aggregator.trails(location)
    return [TrailItem.model_validate(r.to_dict()) for r in rows]
