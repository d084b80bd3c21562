"""
This module defines the routes serving the weather page.
"""

from datetime import datetime, UTC
from typing import Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse

from weather_widget.config import get_settings
from weather_widget.definitions.data_sources import WidgetOutcome
from weather_widget.models.responses import HealthResponse
from weather_widget.schemas.common import Coordinates
from weather_widget.services.widget import WeatherWidget
from weather_widget.utils.dependencies import get_weather_widget
from weather_widget.utils.logger import setup_logger
from weather_widget.views.document import page_response
from weather_widget.views.page import PageView

logger = setup_logger(__name__)
settings = get_settings()

router = APIRouter()

STATUS_BY_OUTCOME = {
    WidgetOutcome.RENDERED: 200,
    WidgetOutcome.UNAVAILABLE: 200,
    WidgetOutcome.STALE: 200,
    WidgetOutcome.INVALID_INPUT: 400,
    WidgetOutcome.NOT_FOUND: 404,
    WidgetOutcome.FAILED: 502,
}

INCOMPLETE_POSITION_MESSAGE = "Both latitude and longitude are required"


def _page_response(
    request: Request, view: PageView, outcome: Optional[WidgetOutcome] = None
) -> HTMLResponse:
    status_code = STATUS_BY_OUTCOME[outcome] if outcome else 200
    return page_response(request, view, settings.app_name, status_code=status_code)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """
    Serve the empty page with the city form and the location button.
    """
    return _page_response(request, PageView())


@router.get("/weather", response_class=HTMLResponse)
async def weather_for_city(
    request: Request,
    city: str = Query("", description="City name"),
    widget: WeatherWidget = Depends(get_weather_widget),
) -> HTMLResponse:
    """
    Look up a city and render its weather into the page.
    """
    widget.view.city_input = city
    outcome = await widget.submit_city(city)

    logger.info(
        "City lookup finished",
        extra={
            "event": "city_lookup",
            "city": city,
            "outcome": outcome.value,
            "request_id": getattr(request.state, "request_id", None),
        },
    )
    return _page_response(request, widget.view, outcome)


@router.get("/weather/location", response_class=HTMLResponse)
async def weather_for_location(
    request: Request,
    latitude: Optional[float] = Query(None, ge=-90, le=90, description="Latitude"),
    longitude: Optional[float] = Query(None, ge=-180, le=180, description="Longitude"),
    widget: WeatherWidget = Depends(get_weather_widget),
) -> HTMLResponse:
    """
    Render the weather at the position reported by the browser.

    A request without a position means the browser offered no geolocation;
    a request carrying only one coordinate is rejected.
    """
    if (latitude is None) != (longitude is None):
        logger.warning(
            "Incomplete position",
            extra={
                "event": "incomplete_position",
                "latitude": latitude,
                "longitude": longitude,
                "request_id": getattr(request.state, "request_id", None),
            },
        )
        widget.renderer.show_error(widget.view, INCOMPLETE_POSITION_MESSAGE)
        return page_response(request, widget.view, settings.app_name, status_code=422)

    geolocation = None
    if latitude is not None and longitude is not None:
        position = Coordinates(latitude=latitude, longitude=longitude)

        async def geolocation() -> Coordinates:
            return position

    outcome = await widget.use_location(geolocation)

    logger.info(
        "Location lookup finished",
        extra={
            "event": "location_lookup",
            "outcome": outcome.value,
            "request_id": getattr(request.state, "request_id", None),
        },
    )
    return _page_response(request, widget.view, outcome)


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Health check endpoint that returns service status.
    """
    return HealthResponse(
        status="healthy",
        version=settings.app_version,
        timestamp=datetime.now(UTC).isoformat(),
    )
