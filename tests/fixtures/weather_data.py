"""
Builders for forecast API bodies and mocked HTTP transports.
"""

from datetime import datetime
from typing import Callable, List, Optional, Tuple

import httpx

from weather_widget.schemas.forecast import ForecastResponse

# (timestamp, temperature, wind, humidity, code)
Row = Tuple[str, float, float, float, int]

FIXED_NOW = datetime(2024, 5, 1, 13, 30)


def build_forecast_payload(rows: List[Row], utc_offset_seconds: Optional[int] = None) -> dict:
    payload = {
        "latitude": 48.85,
        "longitude": 2.35,
        "timezone": "Europe/Paris",
        "hourly": {
            "time": [row[0] for row in rows],
            "temperature_2m": [row[1] for row in rows],
            "wind_speed_10m": [row[2] for row in rows],
            "relative_humidity_2m": [row[3] for row in rows],
            "weather_code": [row[4] for row in rows],
        },
    }
    if utc_offset_seconds is not None:
        payload["utc_offset_seconds"] = utc_offset_seconds
    return payload


def build_forecast(rows: List[Row], utc_offset_seconds: Optional[int] = None) -> ForecastResponse:
    return ForecastResponse.model_validate(build_forecast_payload(rows, utc_offset_seconds))


def mock_http_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
    """
    Create an AsyncClient whose requests are answered by ``handler``.
    """
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))
