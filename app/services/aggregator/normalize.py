"""Provider payload -> stored row mapping, one function per resource kind."""

from datetime import datetime, timezone

from app.models import Business, Location, Meetup, Movie, Trail, Weather
from provider_client.business import BusinessSchema
from provider_client.errors import ProviderShapeMismatch
from provider_client.geocode import GeocodeResultSchema
from provider_client.meetups import MeetupGroupSchema
from provider_client.movies import MovieSchema
from provider_client.trails import TrailSchema
from provider_client.weather import DailyDataSchema
from settings import MOVIE_IMAGE_URL


def date_string(seconds: float) -> str:
    """Render a unix timestamp as e.g. ``Mon Jan 01 2018`` (UTC)."""
    try:
        moment = datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ProviderShapeMismatch(f"Invalid timestamp: {seconds!r}") from e
    return moment.strftime("%a %b %d %Y")


def location(query: str, result: GeocodeResultSchema) -> Location:
    return Location(
        search_query=query,
        formatted_query=result.formatted_address,
        latitude=result.geometry.location.lat,
        longitude=result.geometry.location.lng,
    )


def weather(day: DailyDataSchema) -> Weather:
    return Weather(forecast=day.summary, time=date_string(day.time))


def business(item: BusinessSchema) -> Business:
    return Business(
        name=item.name,
        image_url=item.image_url,
        price=item.price,
        rating=item.rating,
        url=item.url,
    )


def movie(item: MovieSchema) -> Movie:
    """Map a TMDB hit; the poster becomes a full image URL when present."""
    image_url = f"{MOVIE_IMAGE_URL}{item.poster_path}" if item.poster_path else None
    return Movie(
        title=item.title,
        overview=item.overview,
        average_votes=item.vote_average,
        total_votes=item.vote_count,
        image_url=image_url,
        popularity=item.popularity,
        released_on=item.release_date,
    )


def meetup(group: MeetupGroupSchema) -> Meetup:
    # `created` is in milliseconds
    return Meetup(
        link=group.link,
        name=group.name,
        creation_date=date_string(group.created / 1000),
        host=group.organizer.name,
    )


def trail(item: TrailSchema) -> Trail:
    """Map a trail; ``conditionDate`` ("YYYY-MM-DD HH:MM:SS") is split in two."""
    condition_date = condition_time = None
    if item.condition_date:
        day, _, clock = item.condition_date.partition(" ")
        condition_date, condition_time = day, clock or None
    return Trail(
        name=item.name,
        location=item.location,
        length=item.length,
        stars=item.stars,
        star_votes=item.star_votes,
        summary=item.summary,
        trail_url=item.url,
        conditions=item.condition_status,
        condition_date=condition_date,
        condition_time=condition_time,
    )
