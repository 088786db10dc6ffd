"""Dark Sky forecast API schemas."""

from pydantic import BaseModel


class DailyDataSchema(BaseModel):
    """One day of the daily forecast block."""

    time: int
    summary: str | None = None


class DailyBlockSchema(BaseModel):
    summary: str | None = None
    data: list[DailyDataSchema]


class ForecastSchema(BaseModel):
    latitude: float | None = None
    longitude: float | None = None
    daily: DailyBlockSchema
