"""
This module resolves city names to coordinates.
"""

from typing import Optional

import httpx
from pydantic import ValidationError as PydanticValidationError

from weather_widget.config import get_settings
from weather_widget.exceptions import MalformedResponseException
from weather_widget.schemas.common import Coordinates
from weather_widget.schemas.geocoding import GeocodingResponse
from weather_widget.services.external_api import BaseAPIClient
from weather_widget.utils.logger import setup_logger

logger = setup_logger(__name__)
settings = get_settings()


class GeocodingClient(BaseAPIClient):
    api_name = "geocoding"

    def __init__(self, client: httpx.AsyncClient, url: Optional[str] = None):
        super().__init__(client, url or settings.geocoding_api_url)

    async def resolve_city(self, name: str) -> Optional[Coordinates]:
        """
        Look up the best match for a city name.

        Returns None when the service knows no such place.
        """
        data = await self._get_json({"name": name, "count": 1})

        if not data:
            logger.info("No geocoding match", extra={"event": "city_not_found", "city": name})
            return None

        try:
            parsed = GeocodingResponse.model_validate(data)
        except PydanticValidationError as e:
            raise MalformedResponseException(
                f"Unexpected geocoding response for {name}: {e.error_count()} invalid field(s)"
            ) from e

        if not parsed.results:
            logger.info("No geocoding match", extra={"event": "city_not_found", "city": name})
            return None

        result = parsed.results[0]
        logger.debug(
            "City resolved",
            extra={
                "event": "city_resolved",
                "city": name,
                "latitude": result.latitude,
                "longitude": result.longitude,
            },
        )
        return Coordinates(latitude=result.latitude, longitude=result.longitude)
