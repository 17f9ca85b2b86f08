"""
Provider Service behavioral contracts and protocols.

This module defines the protocols (interfaces) that Provider Service components
must implement, enabling dependency injection and testability.
"""

from __future__ import annotations

from datetime import datetime
from typing import Protocol, runtime_checkable

from services.provider_service.timezones import ResolvedTimezone


class TimeResolverProtocol(Protocol):
    """Protocol for timezone resolution and clock reads."""

    def resolve(self, timezone_name: str) -> ResolvedTimezone:
        """
        Map a requested timezone identifier onto a concrete zone.

        Args:
            timezone_name: Identifier exactly as supplied by the caller

        Returns:
            ResolvedTimezone; unsupported identifiers resolve to UTC with
            ``supported=False`` instead of raising
        """
        ...

    def now(self, resolved: ResolvedTimezone) -> datetime:
        """Return the current instant as an aware datetime in the resolved zone."""
        ...


@runtime_checkable
class TimeMetricsProtocol(Protocol):
    """Protocol for Provider Service metrics collection."""

    def record_time_request(self, resolved_zone: str, supported: bool) -> None:
        """
        Record one served time request.

        Args:
            resolved_zone: Zone name actually used for the computation
            supported: False when the UTC fallback was applied
        """
        ...
