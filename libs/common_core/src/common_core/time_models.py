"""Wire models exchanged by the Gateway and Provider services.

TimeResult: successful time lookup (Provider answer or Gateway re-wrap).
ErrorResult: failure body returned by the Gateway.
HealthStatus: static liveness payload returned by both services.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

__all__ = [
    "ErrorResult",
    "HealthStatus",
    "TimeResult",
    "TimeSource",
    "utc_now_rfc3339",
]


def utc_now_rfc3339() -> str:
    """Current UTC time as an RFC 3339 string with an explicit ``+00:00`` offset."""
    return datetime.now(UTC).isoformat()


class TimeSource(str, Enum):
    """Which hop produced a TimeResult."""

    PROVIDER = "api2-service"
    GATEWAY_RELAY = "api1->api2"


class TimeResult(BaseModel):
    """Current time resolved for a requested timezone.

    ``timezone`` echoes the caller's identifier verbatim, even when the Provider
    fell back to UTC for it.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    timestamp: str = Field(description="Offset-aware RFC 3339 timestamp")
    timezone: str = Field(description="Timezone identifier as requested")
    request_id: str = Field(description="End-to-end request identifier")
    source: str = Field(description="Hop that produced this result")


class ErrorResult(BaseModel):
    """Failure body; ``timestamp`` is the time of failure, not the requested time."""

    model_config = ConfigDict(frozen=True)

    error: str
    request_id: str
    timestamp: str = Field(default_factory=utc_now_rfc3339)


class HealthStatus(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str = "healthy"
    service: str
    timestamp: str = Field(default_factory=utc_now_rfc3339)
