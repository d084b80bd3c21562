"""
Services package initialization.
"""

from weather_widget.services.external_api import BaseAPIClient
from weather_widget.services.geocoding_client import GeocodingClient
from weather_widget.services.forecast_client import ForecastClient
from weather_widget.services.extractor import extract
from weather_widget.services.icons import icon_for, is_night_hour
from weather_widget.services.renderer import WeatherRenderer
from weather_widget.services.widget import WeatherWidget

__all__ = [
    "BaseAPIClient",
    "GeocodingClient",
    "ForecastClient",
    "extract",
    "icon_for",
    "is_night_hour",
    "WeatherRenderer",
    "WeatherWidget",
]
