"""zoneinfo-backed implementation of the Provider's timezone resolution."""

from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, datetime
from zoneinfo import ZoneInfo

from services.provider_service.protocols import TimeResolverProtocol
from services.provider_service.timezones import (
    TIMEZONE_ALIASES,
    UTC_ZONE_NAME,
    ResolvedTimezone,
)


def _utc_now() -> datetime:
    return datetime.now(UTC)


class ZoneInfoTimeResolver(TimeResolverProtocol):
    """Resolve identifiers through the fixed alias table and IANA zone data."""

    def __init__(self, clock: Callable[[], datetime] = _utc_now) -> None:
        """
        Initialize the resolver.

        Args:
            clock: Returns the current instant as an aware datetime
        """
        self._clock = clock

    def resolve(self, timezone_name: str) -> ResolvedTimezone:
        zone_name = TIMEZONE_ALIASES.get(timezone_name)
        if zone_name is None:
            return ResolvedTimezone.utc_fallback(timezone_name)

        tz = UTC if zone_name == UTC_ZONE_NAME else ZoneInfo(zone_name)
        return ResolvedTimezone(
            requested=timezone_name,
            zone_name=zone_name,
            tzinfo=tz,
            supported=True,
        )

    def now(self, resolved: ResolvedTimezone) -> datetime:
        return self._clock().astimezone(resolved.tzinfo)
