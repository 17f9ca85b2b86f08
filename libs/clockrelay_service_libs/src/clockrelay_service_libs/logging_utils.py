"""
ClockRelay Structured Logging Utilities using Structlog.

This module provides composable logging utilities built on structlog,
shared by the Gateway and Provider services.

Key Features:
- Request identifier binding through async-safe contextvars
- Processor chains for flexible log enrichment
- Environment-based output formatting
- Explicit logger instances that services hand to request handlers
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, merge_contextvars
from structlog.typing import Processor


def add_service_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """
    Add service context to all logs.

    Fields added:
    - service.name: Logical service name (from SERVICE_NAME env var)
    - deployment.environment: Environment (development/staging/production)

    Args:
        logger: The logger instance (unused but required by structlog)
        method_name: The logging method name (unused but required by structlog)
        event_dict: The log event dictionary to enrich

    Returns:
        Enriched event dictionary with service context fields
    """
    event_dict["service.name"] = os.getenv("SERVICE_NAME", "unknown")
    event_dict["deployment.environment"] = os.getenv("ENVIRONMENT", "development")
    return event_dict


def configure_service_logging(
    service_name: str,
    environment: str | None = None,
    log_level: str = "INFO",
) -> None:
    """
    Configure structlog for a ClockRelay process.

    Called once at process start, before any app factory runs.

    Args:
        service_name: Name of the service (e.g., "api1")
        environment: Environment name (defaults to ENVIRONMENT env var)
        log_level: Logging level (defaults to "INFO")

    Environment Variables:
        LOG_FORMAT: Output format - "json" for JSON, "console" for human-readable
            (default: json in production, console elsewhere)
    """
    if environment is None:
        environment = os.getenv("ENVIRONMENT", "development")

    # Set environment variables for processors
    os.environ.setdefault("SERVICE_NAME", service_name)
    os.environ.setdefault("ENVIRONMENT", environment)

    log_format = os.getenv("LOG_FORMAT", "").lower()
    use_json = log_format == "json" or (not log_format and environment == "production")

    shared_processors: list[Processor] = [
        merge_contextvars,
        add_service_context,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.add_log_level,
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ],
        ),
    ]

    processors: list[Processor]
    if use_json:
        processors = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.set_exc_info,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    logging.basicConfig(
        format="%(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
        level=getattr(logging, log_level.upper()),
        force=True,
    )

    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def create_service_logger(name: str | None = None) -> Any:
    """
    Create a service logger with optional name binding.

    Args:
        name: Optional logger name (e.g., "gateway.api.time")

    Returns:
        A lazy structlog logger; configuration is resolved on first use, so
        module-level loggers honour a later configure_service_logging call.
    """
    if name:
        return structlog.get_logger(logger_name=name)

    return structlog.get_logger()


def bind_request_context(request_id: str, **additional_context: Any) -> None:
    """Reset contextvars and bind the identifier of the request being handled."""
    clear_contextvars()
    bind_contextvars(request_id=request_id, **additional_context)
