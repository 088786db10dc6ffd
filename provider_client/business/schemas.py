"""Yelp Fusion business search schemas."""

from pydantic import BaseModel


class BusinessSchema(BaseModel):
    """Business search hit."""

    name: str
    image_url: str | None = None
    price: str | None = None
    rating: float | None = None
    url: str | None = None


class BusinessSearchSchema(BaseModel):
    total: int | None = None
    businesses: list[BusinessSchema]
