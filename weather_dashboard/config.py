# ABOUTME: Runtime settings for the dashboard, read from WEATHER_* environment variables and .env.
# ABOUTME: Core service functions never read the environment; callers pass these values in.

import logging

from pydantic import ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from weather_dashboard.models import Language
from weather_dashboard.weather_service import FORECAST_URL, GEOCODING_URL

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Dashboard configuration with defaults for the Open-Meteo public API.

    Configuration priority (highest to lowest):
    1. Environment variables (WEATHER_ prefix)
    2. .env file in the working directory
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="WEATHER_",
        env_file=".env",
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
    )

    geocoding_url: str = GEOCODING_URL
    forecast_url: str = FORECAST_URL
    default_city: str = "Tashkent"
    default_latitude: float = 41.3111
    default_longitude: float = 69.2797
    language: Language = "en"
    http_timeout: float = 10.0

    @field_validator("*", mode="wrap")
    @classmethod
    def _fall_back_to_default(cls, value, handler, info: ValidationInfo):
        # A typo in one variable shouldn't stop the dashboard from starting.
        try:
            return handler(value)
        except ValidationError as e:
            default = cls.model_fields[info.field_name].default
            logger.warning("Ignoring invalid setting %s=%r, using %r: %s", info.field_name, value, default, e)
            return default
