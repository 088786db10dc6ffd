"""Google Geocoding API schemas."""

from pydantic import BaseModel


class LatLngSchema(BaseModel):
    lat: float
    lng: float


class GeometrySchema(BaseModel):
    location: LatLngSchema


class GeocodeResultSchema(BaseModel):
    """One geocoding match."""

    formatted_address: str
    geometry: GeometrySchema


class GeocodeResponseSchema(BaseModel):
    status: str | None = None
    results: list[GeocodeResultSchema]
