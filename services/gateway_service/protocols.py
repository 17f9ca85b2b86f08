"""
Protocols for the Gateway Service.

Route handlers depend on these protocols, not on concrete implementations.
"""

from __future__ import annotations

from typing import Protocol

from common_core.time_models import TimeResult


class ProviderClientProtocol(Protocol):
    """Protocol for calls to the downstream Provider Service."""

    async def fetch_time(self, timezone_name: str, request_id: str) -> TimeResult:
        """
        Fetch the current time for a timezone from the Provider Service.

        Args:
            timezone_name: Timezone identifier, forwarded unchanged
            request_id: Identifier minted by the Gateway for this request

        Returns:
            The Provider's TimeResult as received

        Raises:
            ClockRelayError: CONNECTION_ERROR or TIMEOUT when the Provider
                cannot be reached, EXTERNAL_SERVICE_ERROR on a non-2xx status,
                PARSING_ERROR when a 2xx body is not a TimeResult
        """
        ...
