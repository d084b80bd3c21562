"""Weather widget exceptions."""

from .common import (
    WeatherWidgetException,
    ExternalAPIException,
    MalformedResponseException,
    ValidationError,
)

__all__ = [
    "WeatherWidgetException",
    "ExternalAPIException",
    "MalformedResponseException",
    "ValidationError",
]
