"""
This module defines data sources for the application.
"""

from enum import Enum
from typing import List, Literal

HOURLY_VARIABLES: List[str] = [
    "temperature_2m",
    "relative_humidity_2m",
    "weather_code",
    "wind_speed_10m",
]

PanelKind = Literal["today", "forecast"]

CURRENT_LOCATION_LABEL = "your location"


class WeatherIcon(str, Enum):
    """Enumeration of the icon files shipped with the page."""

    SUNNY = "sunny.svg"
    NIGHT = "night.svg"
    CLOUDY_DAY = "cloudy-day.svg"
    CLOUDY_NIGHT = "cloudy-night.svg"
    CLOUDY = "cloudy.svg"
    RAINY = "rainy.svg"
    SNOWY = "snowy.svg"
    THUNDER = "thunder.svg"


class WidgetOutcome(str, Enum):
    """How a single widget action ended."""

    RENDERED = "rendered"
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    UNAVAILABLE = "unavailable"
    STALE = "stale"
