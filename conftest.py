"""
Shared pytest fixtures for ClockRelay service tests.

Handlers receive their logger through dependency injection, so tests inject
a structlog logger backed by CapturingLogger and assert on the recorded calls.
"""

from __future__ import annotations

from typing import Any

import pytest
from structlog.testing import CapturingLogger

from clockrelay_service_libs.testing import make_capturing_logger


@pytest.fixture
def logger_and_sink() -> tuple[Any, CapturingLogger]:
    return make_capturing_logger()


@pytest.fixture
def service_logger(logger_and_sink: tuple[Any, CapturingLogger]) -> Any:
    """Bound logger to inject in place of the production service logger."""
    return logger_and_sink[0]


@pytest.fixture
def log_sink(logger_and_sink: tuple[Any, CapturingLogger]) -> CapturingLogger:
    """Records every call made through service_logger."""
    return logger_and_sink[1]
