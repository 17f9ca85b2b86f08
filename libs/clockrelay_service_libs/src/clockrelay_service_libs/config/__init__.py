"""Configuration utilities for ClockRelay services."""

from .service_base import ServiceSettings

__all__ = ["ServiceSettings"]
