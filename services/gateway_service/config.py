"""
Configuration for the ClockRelay Gateway Service.

Uses Pydantic settings for environment-based configuration. The Provider
Service base URL is read once at startup and handed to the HTTP client
through dependency injection.
"""

from __future__ import annotations

from functools import lru_cache

from common_core.config_enums import ServiceName
from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import SettingsConfigDict

from clockrelay_service_libs.config import ServiceSettings


class Settings(ServiceSettings):
    """Configuration settings for the Gateway Service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="GATEWAY_SERVICE_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    SERVICE_NAME: str = ServiceName.GATEWAY.value

    HTTP_PORT: int = Field(default=3000, description="HTTP server port")

    # Downstream Provider Service
    PROVIDER_URL: str = Field(
        default="http://localhost:4000",
        description="Provider Service base URL",
        validation_alias=AliasChoices("GATEWAY_SERVICE_PROVIDER_URL", "API2_URL"),
    )

    # HTTP Client Timeouts
    HTTP_CLIENT_TIMEOUT_SECONDS: float = 10.0
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = 5.0

    @field_validator("PROVIDER_URL")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
