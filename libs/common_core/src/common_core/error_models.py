"""Structured error detail shared by ClockRelay services."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from .error_enums import ErrorCode


class ErrorDetail(BaseModel):
    """Canonical description of a failure raised inside a service.

    ``correlation_id`` holds the request identifier of the failed attempt so the
    error can be matched against log lines from every hop.
    """

    model_config = ConfigDict(frozen=True)

    error_code: ErrorCode
    message: str
    correlation_id: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC))
    service: str
    operation: str
    details: dict[str, Any] = Field(default_factory=dict)
