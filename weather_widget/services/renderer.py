"""
This module draws weather panels, loading and error markers into a page.
"""

from datetime import datetime
from typing import List, Optional

from weather_widget.config import get_settings
from weather_widget.definitions.data_sources import PanelKind
from weather_widget.schemas.common import ExtractedWeather, HourlyReading
from weather_widget.services.icons import icon_for, is_night_hour
from weather_widget.views.page import Element, PageView

settings = get_settings()

LOADING_ID = "loading"
LOADING_TEXT = "Data about the weather is loading..."
NO_DATA_TEXT = "No data for this hour"
MISSING_VALUE_TEXT = "n/a"


def format_number(value: float) -> str:
    """Drop the trailing ``.0`` the API adds to whole numbers."""
    return f"{value:g}"


def format_measurement(value: Optional[float], unit: str) -> str:
    if value is None:
        return MISSING_VALUE_TEXT
    return f"{format_number(value)}{unit}"


def format_timestamp(timestamp: str) -> str:
    return timestamp.replace("T", ", ")


class WeatherRenderer:
    """
    Builds the today and forecast sections into a ``PageView``.
    """

    def __init__(self, icon_base_url: Optional[str] = None):
        self.icon_base_url = (icon_base_url or settings.icon_base_url).rstrip("/")

    def render(
        self, view: PageView, city_label: str, weather: ExtractedWeather, now: datetime
    ) -> None:
        is_night = is_night_hour(now)
        view.append(self._today_section(city_label, weather.current, is_night))
        view.append(self._forecast_section(city_label, weather.forecasts, is_night))

    def show_loading(self, view: PageView) -> None:
        view.append(Element("p", text=LOADING_TEXT, element_id=LOADING_ID))

    def hide_loading(self, view: PageView) -> None:
        view.remove(LOADING_ID)

    def show_error(self, view: PageView, message: str) -> None:
        view.append(Element("div", text=message, classes=["alert-error"]))

    def _today_section(
        self, city_label: str, current: Optional[HourlyReading], is_night: bool
    ) -> Element:
        section = Element("div")
        section.append(
            Element("h2", text=f"Weather in {city_label} today", classes=["section-title"])
        )
        if current is None:
            section.append(self._placeholder_panel())
        else:
            section.append(self._panel(current, "today", is_night))
        return section

    def _forecast_section(
        self, city_label: str, forecasts: List[HourlyReading], is_night: bool
    ) -> Element:
        section = Element("div")
        section.append(
            Element(
                "h2",
                text=f"Weather in {city_label} for the following days",
                classes=["section-title"],
            )
        )
        items = Element("div", classes=["weather-items"])
        items.append(*(self._panel(reading, "forecast", is_night) for reading in forecasts))
        section.append(items)
        return section

    def _panel(self, reading: HourlyReading, kind: PanelKind, is_night: bool) -> Element:
        icon = icon_for(reading.weather_code, is_night)

        details = Element("div", classes=["weather-details"])
        details.append(
            Element("p", text=format_timestamp(reading.timestamp), classes=["date"]),
            Element("p", text=f"Temperature: {format_measurement(reading.temperature, '°C')}"),
            Element("p", text=f"Wind: {format_measurement(reading.wind_speed, ' km/h')}"),
            Element("p", text=f"Humidity: {format_measurement(reading.humidity, ' %')}"),
        )

        image = Element("div").append(
            Element(
                "img",
                attrs={"src": f"{self.icon_base_url}/{icon.value}", "alt": icon.name.lower()},
            )
        )

        return Element("div", classes=["weather-panel", kind]).append(details, image)

    @staticmethod
    def _placeholder_panel() -> Element:
        details = Element("div", classes=["weather-details"])
        details.append(Element("p", text=NO_DATA_TEXT, classes=["no-data"]))
        return Element("div", classes=["weather-panel", "today"]).append(details)
