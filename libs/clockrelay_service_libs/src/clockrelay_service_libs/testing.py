"""Test helpers for asserting on logs emitted through injected loggers."""

from __future__ import annotations

from typing import Any

import structlog
from structlog.testing import CapturingLogger


def make_capturing_logger() -> tuple[Any, CapturingLogger]:
    """Return a bound logger and the sink that records its calls unrendered."""
    sink = CapturingLogger()
    logger = structlog.wrap_logger(
        sink,
        processors=[],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
    return logger, sink


def logged_events(sink: CapturingLogger, event: str) -> list[dict[str, Any]]:
    """Return the keyword payload of every captured call whose event matches."""
    return [call.kwargs for call in sink.calls if call.kwargs.get("event") == event]


def logged_levels(sink: CapturingLogger, event: str) -> list[str]:
    """Return the log method names (info, error, ...) used for an event."""
    return [call.method_name for call in sink.calls if call.kwargs.get("event") == event]
