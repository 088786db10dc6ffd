"""Movie search API client."""

from provider_client.base import BaseClient
from provider_client.movies.schemas import MovieSchema, MovieSearchSchema
from settings import MOVIE_URL


class MovieClient(BaseClient):
    """Client for the TMDB movie search API."""

    BASE_URL = MOVIE_URL

    async def search(self, query: str) -> list[MovieSchema]:
        """GET /3/search/movie?query={query} - movies matching a query."""
        payload = await self._get(self._base_url, params={"api_key": self._api_key, "query": query})
        return self._parse(MovieSearchSchema, payload).results
