"""Fixed timezone table supported by the Provider Service."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, tzinfo
from types import MappingProxyType

UTC_ZONE_NAME = "UTC"

# Exact, case-sensitive identifiers; anything else falls back to UTC.
TIMEZONE_ALIASES = MappingProxyType(
    {
        "UTC": UTC_ZONE_NAME,
        "EST": "America/New_York",
        "US/Eastern": "America/New_York",
        "PST": "America/Los_Angeles",
        "US/Pacific": "America/Los_Angeles",
        "CET": "Europe/Berlin",
        "Europe/Berlin": "Europe/Berlin",
    }
)

SUPPORTED_TIMEZONES = frozenset(TIMEZONE_ALIASES)


@dataclass(frozen=True)
class ResolvedTimezone:
    """Outcome of mapping a requested identifier onto a concrete zone.

    ``requested`` is kept verbatim because it is echoed back to callers;
    ``supported`` is False when the UTC fallback was applied.
    """

    requested: str
    zone_name: str
    tzinfo: tzinfo
    supported: bool

    @classmethod
    def utc_fallback(cls, requested: str) -> ResolvedTimezone:
        return cls(requested=requested, zone_name=UTC_ZONE_NAME, tzinfo=UTC, supported=False)
