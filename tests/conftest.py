"""
Common test fixtures and configuration.
"""

from typing import List
from unittest.mock import AsyncMock

import pytest

from tests.fixtures.weather_data import FIXED_NOW, Row, build_forecast
from weather_widget.schemas.common import Coordinates
from weather_widget.services.renderer import WeatherRenderer
from weather_widget.services.widget import WeatherWidget
from weather_widget.views.page import PageView


@pytest.fixture
def three_day_rows() -> List[Row]:
    """Three days of 12:00, 13:00 and 14:00 readings."""
    rows = []
    for day in (1, 2, 3):
        for hour in (12, 13, 14):
            rows.append(
                (f"2024-05-0{day}T{hour}:00", 10.0 * day + hour / 10, 5.0 + day, 40.0 + day, day)
            )
    return rows


@pytest.fixture
def geocoder():
    geocoder = AsyncMock()
    geocoder.resolve_city.return_value = Coordinates(latitude=48.85, longitude=2.35)
    return geocoder


@pytest.fixture
def forecast_client():
    forecast_client = AsyncMock()
    forecast_client.fetch_hourly.return_value = build_forecast(
        [("2024-05-01T13:00", 20.0, 10.0, 50.0, 0)]
    )
    return forecast_client


@pytest.fixture
def view():
    return PageView()


@pytest.fixture
def widget(view, geocoder, forecast_client):
    """Create a WeatherWidget with mocked clients and a fixed clock."""
    return WeatherWidget(
        view=view,
        geocoder=geocoder,
        forecast_client=forecast_client,
        renderer=WeatherRenderer(icon_base_url="weather-icons"),
        clock=lambda: FIXED_NOW,
    )
