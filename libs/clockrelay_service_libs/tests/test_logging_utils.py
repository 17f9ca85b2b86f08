"""Tests for logging_utils processors and context binding."""

from __future__ import annotations

import json
from typing import Any

import pytest
import structlog
from structlog.contextvars import get_contextvars

from clockrelay_service_libs.logging_utils import (
    add_service_context,
    bind_request_context,
    configure_service_logging,
    create_service_logger,
)

# Created at import time, before any test configures logging
module_logger = create_service_logger("provider.startup")


class TestAddServiceContext:
    def test_adds_service_name_and_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SERVICE_NAME", "api1")
        monkeypatch.setenv("ENVIRONMENT", "production")
        event_dict: dict[str, Any] = {"event": "Received time request"}

        result = add_service_context(None, "info", event_dict)

        assert result["service.name"] == "api1"
        assert result["deployment.environment"] == "production"
        assert result["event"] == "Received time request"

    def test_defaults_when_env_missing(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SERVICE_NAME", raising=False)
        monkeypatch.delenv("ENVIRONMENT", raising=False)

        result = add_service_context(None, "info", {})

        assert result["service.name"] == "unknown"
        assert result["deployment.environment"] == "development"


class TestBindRequestContext:
    def test_replaces_previous_request_context(self) -> None:
        bind_request_context("first", timezone="EST")
        bind_request_context("second")

        assert get_contextvars() == {"request_id": "second"}
        structlog.contextvars.clear_contextvars()


class TestConfigureServiceLogging:
    @pytest.fixture(autouse=True)
    def _restore_structlog(self, monkeypatch: pytest.MonkeyPatch) -> Any:
        monkeypatch.delenv("LOG_FORMAT", raising=False)
        yield
        structlog.reset_defaults()

    def test_json_output_in_production(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("SERVICE_NAME", "api2")
        monkeypatch.setenv("ENVIRONMENT", "production")

        configure_service_logging("api2", environment="production")
        structlog.get_logger().info("Processing time request", request_id="r-1")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert '"event": "Processing time request"' in line
        assert '"request_id": "r-1"' in line
        assert '"service.name": "api2"' in line

    def test_log_format_env_forces_json(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("LOG_FORMAT", "json")
        monkeypatch.setenv("ENVIRONMENT", "development")
        monkeypatch.setenv("SERVICE_NAME", "api1")

        configure_service_logging("api1", environment="development")
        structlog.get_logger().warning("Unsupported timezone, defaulting to UTC")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert '"level": "warning"' in line

    def test_module_logger_follows_later_configuration(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("SERVICE_NAME", "api2")
        monkeypatch.setenv("ENVIRONMENT", "production")

        configure_service_logging("api2", environment="production")
        module_logger.info("DI AsyncContainer created.")

        line = capsys.readouterr().out.strip().splitlines()[-1]
        assert json.loads(line)["event"] == "DI AsyncContainer created."
        assert json.loads(line)["logger_name"] == "provider.startup"
