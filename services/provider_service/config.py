"""
Configuration module for the ClockRelay Provider Service.

The Provider owns the authoritative time computation and listens on its own
port; every setting can be overridden with a PROVIDER_SERVICE_ prefixed
environment variable.
"""

from __future__ import annotations

from functools import lru_cache

from common_core.config_enums import ServiceName
from pydantic import Field
from pydantic_settings import SettingsConfigDict

from clockrelay_service_libs.config import ServiceSettings


class Settings(ServiceSettings):
    """
    Configuration settings for the Provider Service.

    Settings are loaded from .env files and environment variables.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="PROVIDER_SERVICE_",  # e.g. PROVIDER_SERVICE_HTTP_PORT
    )

    SERVICE_NAME: str = ServiceName.PROVIDER.value

    HTTP_PORT: int = Field(default=4000, description="HTTP server port")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
