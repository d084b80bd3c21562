"""
This module defines schemas for the forecast API.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, model_validator


class HourlySeries(BaseModel):
    """
    Hourly forecast as parallel arrays, one index per hour.

    Values are null for hours a weather model does not cover.
    """

    time: List[str]
    temperature_2m: List[Optional[float]]
    relative_humidity_2m: List[Optional[float]]
    weather_code: List[Optional[int]]
    wind_speed_10m: List[Optional[float]]

    @model_validator(mode="after")
    def check_equal_lengths(self) -> "HourlySeries":
        expected = len(self.time)
        for name in ("temperature_2m", "relative_humidity_2m", "weather_code", "wind_speed_10m"):
            if len(getattr(self, name)) != expected:
                raise ValueError(
                    f"hourly.{name} has {len(getattr(self, name))} entries, expected {expected}"
                )
        return self

    def __len__(self) -> int:
        return len(self.time)


class ForecastResponse(BaseModel):
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    timezone: Optional[str] = None
    utc_offset_seconds: Optional[int] = Field(None, description="Offset of the local time from UTC")
    hourly: HourlySeries
