"""
Shared plumbing for the Open-Meteo HTTP clients.
"""

from typing import Any, Dict

import httpx

from weather_widget.exceptions import ExternalAPIException, MalformedResponseException
from weather_widget.utils.logger import setup_logger

logger = setup_logger(__name__)


class BaseAPIClient:
    """
    Issues single GET requests and decodes JSON bodies.

    No retries are attempted; every failure surfaces as an
    ``ExternalAPIException`` so callers can tell it apart from "no result".
    """

    api_name = "external"

    def __init__(self, client: httpx.AsyncClient, url: str):
        self.client = client
        self.url = url

    async def _get_json(self, params: Dict[str, Any]) -> Any:
        try:
            response = await self.client.get(self.url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.error(
                "Error status from external API",
                extra={
                    "event": "api_error",
                    "api": self.api_name,
                    "status_code": e.response.status_code,
                },
            )
            raise ExternalAPIException(
                f"{self.api_name} API answered with status {e.response.status_code}"
            ) from e
        except httpx.HTTPError as e:
            logger.error(
                "Failed to reach external API",
                extra={
                    "event": "api_error",
                    "api": self.api_name,
                    "error": str(e),
                    "error_type": type(e).__name__,
                },
            )
            raise ExternalAPIException(f"{self.api_name} API request failed: {e}") from e

        try:
            return response.json()
        except ValueError as e:
            logger.error(
                "External API returned invalid JSON",
                extra={"event": "api_malformed", "api": self.api_name},
            )
            raise MalformedResponseException(
                f"{self.api_name} API returned a body that is not JSON"
            ) from e
