"""Meetup API client."""

from provider_client.meetups.client import MeetupClient
from provider_client.meetups.schemas import MeetupGroupSchema, OrganizerSchema

__all__ = [
    "MeetupClient",
    "MeetupGroupSchema",
    "OrganizerSchema",
]
