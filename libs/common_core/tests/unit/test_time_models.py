"""Unit tests for the time wire models."""

from __future__ import annotations

from datetime import datetime

import pytest
from common_core.time_models import (
    ErrorResult,
    HealthStatus,
    TimeResult,
    TimeSource,
    utc_now_rfc3339,
)
from pydantic import ValidationError


class TestTimeResult:
    def test_json_shape(self) -> None:
        result = TimeResult(
            timestamp="2024-01-15T07:00:00-05:00",
            timezone="EST",
            request_id="rid-1",
            source=TimeSource.PROVIDER.value,
        )

        assert result.model_dump() == {
            "timestamp": "2024-01-15T07:00:00-05:00",
            "timezone": "EST",
            "request_id": "rid-1",
            "source": "api2-service",
        }

    def test_is_immutable(self) -> None:
        result = TimeResult(
            timestamp="2024-01-15T12:00:00+00:00",
            timezone="UTC",
            request_id="rid-1",
            source=TimeSource.GATEWAY_RELAY.value,
        )

        with pytest.raises(ValidationError):
            result.request_id = "other"  # type: ignore[misc]

    def test_rejects_missing_fields_in_json(self) -> None:
        with pytest.raises(ValidationError):
            TimeResult.model_validate_json('{"timestamp": "2024-01-15T12:00:00+00:00"}')

    def test_rejects_non_string_fields_in_json(self) -> None:
        with pytest.raises(ValidationError):
            TimeResult.model_validate_json(
                '{"timestamp": 1, "timezone": "UTC", "request_id": "r", "source": "s"}'
            )


class TestDefaults:
    def test_error_result_timestamp_defaults_to_utc_now(self) -> None:
        error = ErrorResult(error="Failed to connect to API2", request_id="rid-1")

        assert datetime.fromisoformat(error.timestamp).utcoffset().total_seconds() == 0

    def test_health_status_defaults(self) -> None:
        health = HealthStatus(service="api2")

        assert health.status == "healthy"
        assert health.timestamp.endswith("+00:00")

    def test_utc_now_is_offset_aware(self) -> None:
        assert datetime.fromisoformat(utc_now_rfc3339()).tzinfo is not None
