"""Resource API response schemas."""

from pydantic import BaseModel


class WeatherItem(BaseModel):
    """Daily forecast."""

    forecast: str | None
    time: str


class BusinessItem(BaseModel):
    """Restaurant listing."""

    name: str
    image_url: str | None
    price: str | None
    rating: float | None
    url: str | None


class MovieItem(BaseModel):
    """Movie summary."""

    title: str
    overview: str | None
    average_votes: float | None
    total_votes: int | None
    image_url: str | None
    popularity: float | None
    released_on: str | None


class MeetupItem(BaseModel):
    """Meetup group."""

    link: str | None
    name: str
    creation_date: str
    host: str | None


class TrailItem(BaseModel):
    """Hiking trail."""

    name: str
    location: str | None
    length: float | None
    stars: float | None
    star_votes: int | None
    summary: str | None
    trail_url: str | None
    conditions: str | None
    condition_date: str | None
    condition_time: str | None
