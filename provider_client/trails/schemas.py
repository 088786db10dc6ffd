"""Hiking Project trail schemas."""

from pydantic import BaseModel, ConfigDict, Field


class TrailSchema(BaseModel):
    """Trail near a point."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    location: str | None = None
    length: float | None = None
    stars: float | None = None
    star_votes: int | None = Field(alias="starVotes", default=None)
    summary: str | None = None
    url: str | None = None
    condition_status: str | None = Field(alias="conditionStatus", default=None)
    condition_date: str | None = Field(alias="conditionDate", default=None)


class TrailsResponseSchema(BaseModel):
    trails: list[TrailSchema]
