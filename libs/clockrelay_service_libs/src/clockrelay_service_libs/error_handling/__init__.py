"""Error handling utilities for ClockRelay services."""

from .clockrelay_error import ClockRelayError
from .factories import (
    raise_connection_error,
    raise_external_service_error,
    raise_parsing_error,
    raise_timeout_error,
)

__all__ = [
    "ClockRelayError",
    "raise_connection_error",
    "raise_external_service_error",
    "raise_parsing_error",
    "raise_timeout_error",
]
