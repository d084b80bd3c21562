"""
This module wires user actions to geocoding, forecast and rendering.
"""

from datetime import datetime, timedelta, timezone
from typing import Awaitable, Callable, Optional

from weather_widget.definitions.data_sources import CURRENT_LOCATION_LABEL, WidgetOutcome
from weather_widget.exceptions import ValidationError
from weather_widget.schemas.common import Coordinates
from weather_widget.schemas.forecast import ForecastResponse
from weather_widget.services.extractor import extract
from weather_widget.services.forecast_client import ForecastClient
from weather_widget.services.geocoding_client import GeocodingClient
from weather_widget.services.renderer import WeatherRenderer
from weather_widget.utils.logger import setup_logger
from weather_widget.views.page import PageView

logger = setup_logger(__name__)

GeolocationProvider = Callable[[], Awaitable[Coordinates]]
Clock = Callable[[], datetime]

EMPTY_CITY_MESSAGE = "Please enter the name of the city"
MAX_CITY_NAME_LENGTH = 100
LONG_CITY_MESSAGE = f"The name of the city must be at most {MAX_CITY_NAME_LENGTH} characters"


def local_clock() -> datetime:
    return datetime.now().astimezone()


def normalize_city_name(raw_name: Optional[str]) -> str:
    city = (raw_name or "").strip()
    if not city:
        raise ValidationError(EMPTY_CITY_MESSAGE)
    if len(city) > MAX_CITY_NAME_LENGTH:
        raise ValidationError(LONG_CITY_MESSAGE)
    return city


class WeatherWidget:
    """
    Runs the city-name and geolocation flows against one page.

    Every action clears the page, shows a loading marker, resolves
    coordinates, fetches the forecast and renders it. Failures are shown in
    the page and never raised to the caller.

    Each action takes a new generation number. Once an action has awaited the
    network, it only touches the page if no newer action started meanwhile,
    so a slow earlier request cannot overwrite a later result.
    """

    def __init__(
        self,
        view: PageView,
        geocoder: GeocodingClient,
        forecast_client: ForecastClient,
        renderer: Optional[WeatherRenderer] = None,
        clock: Clock = local_clock,
    ):
        self.view = view
        self.geocoder = geocoder
        self.forecast_client = forecast_client
        self.renderer = renderer or WeatherRenderer()
        self.clock = clock
        self._generation = 0

    @property
    def generation(self) -> int:
        return self._generation

    def _next_generation(self) -> int:
        self._generation += 1
        return self._generation

    def _is_latest(self, generation: int) -> bool:
        return generation == self._generation

    async def submit_city(self, raw_name: Optional[str]) -> WidgetOutcome:
        generation = self._next_generation()
        self.view.clear()

        try:
            city = normalize_city_name(raw_name)
        except ValidationError as e:
            self.renderer.show_error(self.view, str(e))
            return WidgetOutcome.INVALID_INPUT

        self.renderer.show_loading(self.view)

        try:
            coordinates = await self.geocoder.resolve_city(city)

            if not self._is_latest(generation):
                return self._discard(generation, city)

            if coordinates is None:
                self.renderer.hide_loading(self.view)
                self.renderer.show_error(
                    self.view, f"The coordinates of the {city} city couldn't be provided!"
                )
                return WidgetOutcome.NOT_FOUND

            return await self._show_weather(generation, city, coordinates)
        except Exception as e:
            return self._fail(generation, city, e)

    async def use_location(
        self, geolocation: Optional[GeolocationProvider]
    ) -> WidgetOutcome:
        generation = self._next_generation()
        self.view.clear()

        if geolocation is None:
            logger.warning(
                "Geolocation is not available",
                extra={"event": "geolocation_unavailable", "generation": generation},
            )
            return WidgetOutcome.UNAVAILABLE

        self.renderer.show_loading(self.view)

        try:
            coordinates = await geolocation()

            if not self._is_latest(generation):
                return self._discard(generation, CURRENT_LOCATION_LABEL)

            return await self._show_weather(generation, CURRENT_LOCATION_LABEL, coordinates)
        except Exception as e:
            return self._fail(generation, CURRENT_LOCATION_LABEL, e)

    async def _show_weather(
        self, generation: int, city_label: str, coordinates: Coordinates
    ) -> WidgetOutcome:
        forecast = await self.forecast_client.fetch_hourly(
            coordinates.latitude, coordinates.longitude
        )

        if not self._is_latest(generation):
            return self._discard(generation, city_label)

        now = self._local_now(forecast)
        weather = extract(forecast, now)

        self.renderer.hide_loading(self.view)
        self.renderer.render(self.view, city_label, weather, now)
        self.view.clear_city_input()

        logger.info(
            "Weather rendered",
            extra={
                "event": "weather_rendered",
                "city": city_label,
                "generation": generation,
                "has_current": weather.current is not None,
                "forecast_days": len(weather.forecasts),
            },
        )
        return WidgetOutcome.RENDERED

    def _local_now(self, forecast: ForecastResponse) -> datetime:
        now = self.clock()
        if now.tzinfo is not None and forecast.utc_offset_seconds is not None:
            now = now.astimezone(timezone(timedelta(seconds=forecast.utc_offset_seconds)))
        return now

    def _discard(self, generation: int, city_label: str) -> WidgetOutcome:
        logger.info(
            "Discarding stale weather result",
            extra={
                "event": "stale_result",
                "city": city_label,
                "generation": generation,
                "latest_generation": self._generation,
            },
        )
        return WidgetOutcome.STALE

    def _fail(self, generation: int, city_label: str, error: Exception) -> WidgetOutcome:
        logger.error(
            "Failed to show weather",
            extra={
                "event": "widget_error",
                "city": city_label,
                "generation": generation,
                "error": str(error),
                "error_type": type(error).__name__,
            },
        )

        if not self._is_latest(generation):
            return WidgetOutcome.STALE

        self.renderer.hide_loading(self.view)
        self.renderer.show_error(self.view, f"An error occurred: {error}")
        return WidgetOutcome.FAILED
