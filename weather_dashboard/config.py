# ABOUTME: Runtime configuration for the weather dashboard, read from the process environment.
# ABOUTME: Loads .env once and exposes provider API key, endpoint URLs, and log level as Settings.

import logging
import os
from typing import Literal, get_args

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org"
DEFAULT_UV_URL = "https://api.openweathermap.org/data/3.0/onecall"

LogLevel = Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"]


class Settings(BaseModel):
    """Provider credentials and endpoints used by the weather service."""

    model_config = ConfigDict(frozen=True)

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    uv_url: str = DEFAULT_UV_URL
    log_level: LogLevel = "INFO"

    @property
    def current_weather_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/data/2.5/weather"

    @property
    def forecast_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/data/2.5/forecast"


def load_settings() -> Settings:
    """Build Settings from environment variables, after loading a local .env file if present.

    An unknown log level falls back to INFO with a warning.
    """
    load_dotenv()
    log_level = os.environ.get("WEATHER_DASHBOARD_LOG_LEVEL", "INFO").upper()
    if log_level not in get_args(LogLevel):
        logger.warning("Unknown WEATHER_DASHBOARD_LOG_LEVEL %r, using INFO", log_level)
        log_level = "INFO"
    return Settings(
        api_key=os.environ.get("OPENWEATHER_API_KEY", ""),
        base_url=os.environ.get("OPENWEATHER_BASE_URL") or DEFAULT_BASE_URL,
        uv_url=os.environ.get("OPENWEATHER_UV_URL") or DEFAULT_UV_URL,
        log_level=log_level,
    )
