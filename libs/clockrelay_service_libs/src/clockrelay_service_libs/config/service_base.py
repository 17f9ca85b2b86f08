"""
Base settings shared by every ClockRelay service.

Concrete services subclass ServiceSettings, set their own SERVICE_NAME,
HTTP_PORT and env_prefix, and add service-specific fields.
"""

from __future__ import annotations

from common_core.config_enums import Environment
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServiceSettings(BaseSettings):
    """Common service identity, logging, listener and CORS settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    SERVICE_NAME: str = "clockrelay-service"

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",  # Read from global ENVIRONMENT var
        description="Runtime environment for the service",
    )
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    HTTP_HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    HTTP_PORT: int = Field(default=8000, description="HTTP server port")
    GRACEFUL_TIMEOUT: int = Field(default=30, description="Seconds to drain on shutdown")
    KEEP_ALIVE_TIMEOUT: int = Field(default=5, description="Idle keep-alive seconds")

    # Fully permissive CORS
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_METHODS: list[str] = Field(default_factory=lambda: ["*"])
    CORS_ALLOW_HEADERS: list[str] = Field(default_factory=lambda: ["*"])

    def is_development(self) -> bool:
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    @property
    def bind_address(self) -> str:
        """Hypercorn bind string, e.g. ``0.0.0.0:3000``."""
        return f"{self.HTTP_HOST}:{self.HTTP_PORT}"
