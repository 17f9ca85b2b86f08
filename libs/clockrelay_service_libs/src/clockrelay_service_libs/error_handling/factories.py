"""
Factory functions that build an ErrorDetail and raise ClockRelayError.

Each factory fixes the error code for one failure class so call sites only
describe what happened.
"""

from __future__ import annotations

from typing import Any, NoReturn

from common_core.error_enums import ErrorCode
from common_core.error_models import ErrorDetail

from .clockrelay_error import ClockRelayError


def _raise(
    error_code: ErrorCode,
    *,
    service: str,
    operation: str,
    message: str,
    correlation_id: str,
    details: dict[str, Any],
) -> NoReturn:
    raise ClockRelayError(
        ErrorDetail(
            error_code=error_code,
            message=message,
            correlation_id=correlation_id,
            service=service,
            operation=operation,
            details=details,
        )
    )


def raise_connection_error(
    service: str,
    operation: str,
    target: str,
    message: str,
    correlation_id: str,
    **additional_context: Any,
) -> NoReturn:
    """Downstream could not be reached (DNS, refused connection, transport failure)."""
    _raise(
        ErrorCode.CONNECTION_ERROR,
        service=service,
        operation=operation,
        message=message,
        correlation_id=correlation_id,
        details={"target": target, **additional_context},
    )


def raise_timeout_error(
    service: str,
    operation: str,
    timeout_seconds: float,
    message: str,
    correlation_id: str,
    **additional_context: Any,
) -> NoReturn:
    _raise(
        ErrorCode.TIMEOUT,
        service=service,
        operation=operation,
        message=message,
        correlation_id=correlation_id,
        details={"timeout_seconds": timeout_seconds, **additional_context},
    )


def raise_external_service_error(
    service: str,
    operation: str,
    external_service: str,
    message: str,
    correlation_id: str,
    status_code: int | None = None,
    **additional_context: Any,
) -> NoReturn:
    """Downstream answered with a failing status."""
    details: dict[str, Any] = {"external_service": external_service, **additional_context}
    if status_code is not None:
        details["status_code"] = status_code
    _raise(
        ErrorCode.EXTERNAL_SERVICE_ERROR,
        service=service,
        operation=operation,
        message=message,
        correlation_id=correlation_id,
        details=details,
    )


def raise_parsing_error(
    service: str,
    operation: str,
    parse_target: str,
    message: str,
    correlation_id: str,
    **additional_context: Any,
) -> NoReturn:
    """A payload did not match the expected shape."""
    _raise(
        ErrorCode.PARSING_ERROR,
        service=service,
        operation=operation,
        message=message,
        correlation_id=correlation_id,
        details={"parse_target": parse_target, **additional_context},
    )
