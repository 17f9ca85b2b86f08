"""Core exception type carrying a structured ErrorDetail."""

from __future__ import annotations

from typing import Any

from common_core.error_models import ErrorDetail


class ClockRelayError(Exception):
    """Exception wrapping an ErrorDetail.

    Routes catch this type, log it with its error code, and turn it into the
    service's error response. The detail's ``correlation_id`` is the request
    identifier of the failed attempt.
    """

    def __init__(self, error_detail: ErrorDetail) -> None:
        super().__init__(error_detail.message)
        self.error_detail = error_detail

    def __str__(self) -> str:
        return f"[{self.error_detail.error_code.value}] {self.error_detail.message}"

    @property
    def correlation_id(self) -> str:
        return self.error_detail.correlation_id

    @property
    def error_code(self) -> str:
        return self.error_detail.error_code.value

    @property
    def service(self) -> str:
        return self.error_detail.service

    @property
    def operation(self) -> str:
        return self.error_detail.operation

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe representation for structured logging."""
        return self.error_detail.model_dump(mode="json")
