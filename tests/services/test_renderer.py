"""
Tests for the render pipeline.
"""

from datetime import datetime

import pytest

from weather_widget.schemas.common import ExtractedWeather, HourlyReading
from weather_widget.services.renderer import (
    LOADING_ID,
    NO_DATA_TEXT,
    WeatherRenderer,
    format_number,
    format_timestamp,
)
from weather_widget.views.page import PageView

DAYTIME = datetime(2024, 5, 1, 13, 30)
NIGHTTIME = datetime(2024, 5, 1, 22, 0)


def reading(timestamp: str, temperature: float = 20.0, code: int = 0) -> HourlyReading:
    return HourlyReading(
        timestamp=timestamp, temperature=temperature, wind_speed=10.0, humidity=50.0, weather_code=code
    )


@pytest.fixture
def renderer():
    return WeatherRenderer(icon_base_url="weather-icons/")


class TestFormatting:
    def test_format_number_drops_trailing_zero(self):
        assert format_number(20.0) == "20"
        assert format_number(20.5) == "20.5"
        assert format_number(-3.2) == "-3.2"

    def test_format_timestamp(self):
        assert format_timestamp("2024-05-01T13:00") == "2024-05-01, 13:00"


class TestWeatherRenderer:
    """Test cases for WeatherRenderer."""

    def test_render_today_and_forecast_sections(self, renderer):
        view = PageView()
        weather = ExtractedWeather(
            current=reading("2024-05-01T13:00"),
            forecasts=[reading("2024-05-02T13:00", 18.5, 61), reading("2024-05-03T13:00", 15.0, 71)],
        )

        renderer.render(view, "Paris", weather, DAYTIME)

        titles = [e.text for e in view.find_all("section-title")]
        assert titles == ["Weather in Paris today", "Weather in Paris for the following days"]

        today = view.find_all("today")
        assert len(today) == 1
        assert "2024-05-01, 13:00" in [e.text for e in today[0].iter()]

        forecast_panels = view.find_all("forecast")
        assert len(forecast_panels) == 2
        assert view.find_all("weather-items")[0].children == forecast_panels

        texts = view.texts()
        assert "Temperature: 20°C" in texts
        assert "Temperature: 18.5°C" in texts
        assert "Wind: 10 km/h" in texts
        assert "Humidity: 50 %" in texts

    def test_icons_use_base_url_and_shared_night_flag(self, renderer):
        view = PageView()
        weather = ExtractedWeather(
            current=reading("2024-05-01T22:00", code=0),
            forecasts=[reading("2024-05-02T22:00", code=2), reading("2024-05-03T22:00", code=95)],
        )

        renderer.render(view, "Oslo", weather, NIGHTTIME)

        sources = [e.attrs["src"] for e in view.iter() if e.tag == "img"]
        assert sources == [
            "weather-icons/night.svg",
            "weather-icons/cloudy-night.svg",
            "weather-icons/thunder.svg",
        ]

    def test_missing_current_renders_placeholder(self, renderer):
        view = PageView()

        renderer.render(view, "Paris", ExtractedWeather(), DAYTIME)

        assert NO_DATA_TEXT in view.texts()
        assert len(view.find_all("today")) == 1
        assert view.find_all("forecast") == []
        assert view.find_all("weather-items")[0].children == []

    def test_loading_marker_lifecycle(self, renderer):
        view = PageView()

        renderer.show_loading(view)
        assert view.find(LOADING_ID).text == "Data about the weather is loading..."

        renderer.hide_loading(view)
        assert view.find(LOADING_ID) is None

        # hiding twice is harmless
        renderer.hide_loading(view)

    def test_show_error(self, renderer):
        view = PageView()

        renderer.show_error(view, "Something broke")

        errors = view.find_all("alert-error")
        assert len(errors) == 1
        assert errors[0].text == "Something broke"

    def test_missing_values_render_placeholders(self, renderer):
        view = PageView()
        current = HourlyReading(
            timestamp="2024-05-01T13:00", temperature=None, wind_speed=4.0, humidity=None, weather_code=None
        )

        renderer.render(view, "Paris", ExtractedWeather(current=current), DAYTIME)

        texts = view.texts()
        assert "Temperature: n/a" in texts
        assert "Wind: 4 km/h" in texts
        assert "Humidity: n/a" in texts
        assert [e.attrs["src"] for e in view.iter() if e.tag == "img"] == ["weather-icons/sunny.svg"]
