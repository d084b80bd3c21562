"""
This module picks the readings shown by the widget out of an hourly series.
"""

from datetime import datetime

from weather_widget.schemas.common import ExtractedWeather, HourlyReading
from weather_widget.schemas.forecast import ForecastResponse


def extract(raw: ForecastResponse, now: datetime) -> ExtractedWeather:
    """
    Split the series into the current reading and same-hour forecasts.

    Every entry at ``now``'s hour of day is kept: today's becomes
    ``current`` and the others become ``forecasts`` in series order.
    Entries at any other hour are dropped, so null values there never
    matter; nulls inside a kept entry stay None on the reading.

    Args:
        raw: Validated forecast response
        now: Current time, in the location's local time

    Returns:
        ExtractedWeather with ``current`` set to None if today's hour is missing
    """
    hourly = raw.hourly
    today = now.date()
    current = None
    forecasts = []

    for i, timestamp in enumerate(hourly.time):
        item_datetime = datetime.fromisoformat(timestamp)

        if item_datetime.hour != now.hour:
            continue

        reading = HourlyReading(
            timestamp=timestamp,
            temperature=hourly.temperature_2m[i],
            wind_speed=hourly.wind_speed_10m[i],
            humidity=hourly.relative_humidity_2m[i],
            weather_code=hourly.weather_code[i],
        )

        # no early exit: a duplicated hour resolves to its last occurrence
        if item_datetime.date() == today:
            current = reading
        else:
            forecasts.append(reading)

    return ExtractedWeather(current=current, forecasts=forecasts)
