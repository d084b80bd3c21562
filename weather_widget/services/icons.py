"""
This module maps WMO weather codes to the page's icon files.
"""

from datetime import datetime
from typing import Dict, Optional, Tuple

from weather_widget.config import get_settings
from weather_widget.definitions.data_sources import WeatherIcon

settings = get_settings()

# (day icon, night icon) per WMO code group
_CLEAR = (WeatherIcon.SUNNY, WeatherIcon.NIGHT)
_PARTLY_CLOUDY = (WeatherIcon.CLOUDY_DAY, WeatherIcon.CLOUDY_NIGHT)
_FOG_DRIZZLE = (WeatherIcon.CLOUDY, WeatherIcon.CLOUDY)
_RAIN = (WeatherIcon.RAINY, WeatherIcon.RAINY)
_SNOW = (WeatherIcon.SNOWY, WeatherIcon.SNOWY)
_THUNDERSTORM = (WeatherIcon.THUNDER, WeatherIcon.THUNDER)

ICONS_BY_CODE: Dict[int, Tuple[WeatherIcon, WeatherIcon]] = {0: _CLEAR}
ICONS_BY_CODE.update({code: _PARTLY_CLOUDY for code in (1, 2, 3)})
ICONS_BY_CODE.update({code: _FOG_DRIZZLE for code in (45, 48, 51, 53, 55, 56, 57)})
ICONS_BY_CODE.update({code: _RAIN for code in (61, 63, 65, 66, 67, 80, 81, 82)})
ICONS_BY_CODE.update({code: _SNOW for code in (71, 73, 75, 77, 85, 86)})
ICONS_BY_CODE.update({code: _THUNDERSTORM for code in (95, 96, 99)})


def icon_for(code: Optional[int], is_night: bool) -> WeatherIcon:
    """Unknown or missing codes fall back to the clear sky icon."""
    day_icon, night_icon = ICONS_BY_CODE.get(code, _CLEAR)
    return night_icon if is_night else day_icon


def is_night_hour(
    now: datetime,
    night_start: Optional[int] = None,
    night_end: Optional[int] = None,
) -> bool:
    start = settings.night_start_hour if night_start is None else night_start
    end = settings.night_end_hour if night_end is None else night_end
    return now.hour >= start or now.hour <= end
