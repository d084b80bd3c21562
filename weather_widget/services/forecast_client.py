"""
This module fetches hourly forecasts for a position.
"""

from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from weather_widget.config import get_settings
from weather_widget.definitions.data_sources import HOURLY_VARIABLES
from weather_widget.exceptions import MalformedResponseException
from weather_widget.schemas.forecast import ForecastResponse
from weather_widget.services.external_api import BaseAPIClient
from weather_widget.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


class ForecastClient(BaseAPIClient):
    api_name = "forecast"

    def __init__(self, client: httpx.AsyncClient, url: Optional[str] = None):
        super().__init__(client, url or settings.forecast_api_url)

    async def fetch_hourly(self, latitude: float, longitude: float) -> ForecastResponse:
        """
        Fetch the hourly series in the location's own timezone.
        """
        data = await self._get_json(
            {
                "latitude": latitude,
                "longitude": longitude,
                "timezone": "auto",
                "hourly": ",".join(HOURLY_VARIABLES),
            }
        )

        try:
            forecast = ForecastResponse.model_validate(data)
        except PydanticValidationError as e:
            logger.error(
                "Forecast response failed validation",
                extra={
                    "event": "api_malformed",
                    "api": self.api_name,
                    "latitude": latitude,
                    "longitude": longitude,
                    "error": str(e),
                },
            )
            raise MalformedResponseException(
                f"Unexpected forecast response: {e.error_count()} invalid field(s)"
            ) from e

        logger.debug(
            "Forecast fetched",
            extra={
                "event": "forecast_fetched",
                "hours": len(forecast.hourly),
                "timezone": forecast.timezone,
            },
        )
        return forecast
