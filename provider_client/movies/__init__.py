"""Movie search API client."""

from provider_client.movies.client import MovieClient
from provider_client.movies.schemas import MovieSchema, MovieSearchSchema

__all__ = [
    "MovieClient",
    "MovieSchema",
    "MovieSearchSchema",
]
