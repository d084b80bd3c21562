"""
This module defines the models shared by extraction and rendering.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class Coordinates(BaseModel):
    """
    Geographic position of a location.

    Attributes:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
    """

    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")


class HourlyReading(BaseModel):
    """
    One hour of the forecast series.

    The timestamp is kept as the API sent it, in the location's local time.
    Measurements are None where the API had no value for that hour.
    """

    timestamp: str = Field(..., description="Local ISO timestamp, e.g. 2024-05-01T13:00")
    temperature: Optional[float] = Field(..., description="Temperature in °C")
    wind_speed: Optional[float] = Field(..., description="Wind speed in km/h")
    humidity: Optional[float] = Field(..., description="Relative humidity percentage")
    weather_code: Optional[int] = Field(..., description="WMO weather code")


class ExtractedWeather(BaseModel):
    current: Optional[HourlyReading] = None
    forecasts: List[HourlyReading] = Field(default_factory=list)
