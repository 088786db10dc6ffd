"""Meetup group search schemas."""

from pydantic import BaseModel


class OrganizerSchema(BaseModel):
    name: str | None = None


class MeetupGroupSchema(BaseModel):
    """Meetup group."""

    name: str
    link: str | None = None
    created: int
    organizer: OrganizerSchema
