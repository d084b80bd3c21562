"""
FastAPI dependency injection providers.

The shared ``httpx.AsyncClient`` is created in the application lifespan and
stored on ``app.state``; every request builds its own widget around a fresh
page view.
"""

import httpx
from fastapi import Depends, Request

from weather_widget.config import get_settings
from weather_widget.services.forecast_client import ForecastClient
from weather_widget.services.geocoding_client import GeocodingClient
from weather_widget.services.renderer import WeatherRenderer
from weather_widget.services.widget import WeatherWidget
from weather_widget.views.page import PageView

settings = get_settings()


def create_http_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=settings.http_timeout)


async def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Provide the application's shared HTTP client.

    Returns:
        httpx.AsyncClient: Client opened during startup
    """
    return request.app.state.http_client  # type: ignore[attr-defined]


async def get_geocoding_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> GeocodingClient:
    return GeocodingClient(http_client)


async def get_forecast_client(
    http_client: httpx.AsyncClient = Depends(get_http_client),
) -> ForecastClient:
    return ForecastClient(http_client)


async def get_weather_widget(
    geocoder: GeocodingClient = Depends(get_geocoding_client),
    forecast_client: ForecastClient = Depends(get_forecast_client),
) -> WeatherWidget:
    """
    Provide a widget drawing into a new, empty page.

    Args:
        geocoder: Geocoding client from dependency
        forecast_client: Forecast client from dependency

    Returns:
        WeatherWidget: Widget for the current request
    """
    return WeatherWidget(
        view=PageView(),
        geocoder=geocoder,
        forecast_client=forecast_client,
        renderer=WeatherRenderer(),
    )
