"""
This module contains configuration settings for the application.
"""

from functools import lru_cache
from typing import Optional, List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application configuration using Pydantic BaseSettings.
    Automatically handles environment variable parsing and type conversion.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # Application settings
    app_name: str = "Weather Widget"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # External API settings
    geocoding_api_url: str = "https://geocoding-api.open-meteo.com/v1/search"
    forecast_api_url: str = "https://api.open-meteo.com/v1/forecast"
    http_timeout: Optional[float] = None

    # Rendering settings
    icon_base_url: str = "weather-icons"
    night_start_hour: int = 20
    night_end_hour: int = 6

    # CORS settings
    cors_origins: List[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: List[str] = ["*"]
    cors_allow_headers: List[str] = ["*"]


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings.
    """
    return Settings()
