"""
common_core.error_enums - Centralized error code definitions.
"""

from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    EXTERNAL_SERVICE_ERROR = "EXTERNAL_SERVICE_ERROR"

    # Generic downstream failures (can be used by any service)
    TIMEOUT = "TIMEOUT"
    CONNECTION_ERROR = "CONNECTION_ERROR"
    PARSING_ERROR = "PARSING_ERROR"
