"""TMDB movie search schemas."""

from pydantic import BaseModel


class MovieSchema(BaseModel):
    """Movie search hit."""

    title: str
    overview: str | None = None
    vote_average: float | None = None
    vote_count: int | None = None
    poster_path: str | None = None
    popularity: float | None = None
    release_date: str | None = None


class MovieSearchSchema(BaseModel):
    page: int | None = None
    results: list[MovieSchema]
