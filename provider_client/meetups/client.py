"""Meetup API client."""

from provider_client.base import BaseClient
from provider_client.meetups.schemas import MeetupGroupSchema
from settings import MEETUP_URL


class MeetupClient(BaseClient):
    """Client for the Meetup group search API."""

    BASE_URL = MEETUP_URL

    async def groups(self, location: str, page: int = 20) -> list[MeetupGroupSchema]:
        """GET /find/groups?location={location} - groups near a place."""
        payload = await self._get(
            self._base_url,
            params={"location": location, "page": page, "key": self._api_key},
        )
        return self._parse(list[MeetupGroupSchema], payload)
