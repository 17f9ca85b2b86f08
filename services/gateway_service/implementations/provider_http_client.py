"""HTTP client for the downstream Provider Service.

Wraps a shared httpx AsyncClient and turns every way the Provider call can go
wrong into a ClockRelayError with the matching error code, so the route layer
only has to choose a status code.
"""

from __future__ import annotations

import time

import httpx
from common_core.config_enums import ServiceName
from common_core.time_models import TimeResult
from pydantic import ValidationError
from structlog.stdlib import BoundLogger

from clockrelay_service_libs.error_handling import (
    raise_connection_error,
    raise_external_service_error,
    raise_parsing_error,
    raise_timeout_error,
)
from services.gateway_service.app.metrics import GatewayMetrics
from services.gateway_service.protocols import ProviderClientProtocol

CONNECT_FAILURE_MESSAGE = "Failed to connect to API2"
PARSE_FAILURE_MESSAGE = "Failed to parse response from API2"
TIME_ENDPOINT = "/time"


class ProviderHttpClient(ProviderClientProtocol):
    """Provider Service client backed by httpx."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        base_url: str,
        metrics: GatewayMetrics,
        logger: BoundLogger,
    ) -> None:
        """Initialize the client.

        Args:
            client: Shared httpx AsyncClient owned by the DI container
            base_url: Provider Service base URL without trailing slash
            metrics: Gateway metrics for downstream call accounting
            logger: Logger for forwarding and failure events
        """
        self._client = client
        self._base_url = base_url
        self._metrics = metrics
        self._logger = logger

    async def fetch_time(self, timezone_name: str, request_id: str) -> TimeResult:
        url = f"{self._base_url}{TIME_ENDPOINT}"
        params = {"timezone": timezone_name, "request_id": request_id}

        self._logger.info(
            "Forwarding request to API2",
            request_id=request_id,
            provider_url=self._base_url,
        )

        started = time.perf_counter()
        try:
            response = await self._client.get(url, params=params)
        except httpx.TimeoutException as e:
            self._record_call("timeout", started)
            self._logger.error(
                CONNECT_FAILURE_MESSAGE,
                request_id=request_id,
                provider_url=self._base_url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise_timeout_error(
                service=ServiceName.GATEWAY.value,
                operation="fetch_time",
                timeout_seconds=self._timeout_seconds(),
                message=CONNECT_FAILURE_MESSAGE,
                correlation_id=request_id,
                target=url,
            )
        except httpx.RequestError as e:
            self._record_call("connection_error", started)
            self._logger.error(
                CONNECT_FAILURE_MESSAGE,
                request_id=request_id,
                provider_url=self._base_url,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise_connection_error(
                service=ServiceName.GATEWAY.value,
                operation="fetch_time",
                target=url,
                message=CONNECT_FAILURE_MESSAGE,
                correlation_id=request_id,
                error_type=type(e).__name__,
            )

        self._record_call(str(response.status_code), started)

        if not response.is_success:
            status_text = f"{response.status_code} {response.reason_phrase}".rstrip()
            self._logger.error(
                "API2 returned error status",
                request_id=request_id,
                status_code=response.status_code,
            )
            raise_external_service_error(
                service=ServiceName.GATEWAY.value,
                operation="fetch_time",
                external_service=ServiceName.PROVIDER.value,
                message=f"API2 returned status: {status_text}",
                correlation_id=request_id,
                status_code=response.status_code,
            )

        try:
            result = TimeResult.model_validate_json(response.content)
        except ValidationError as e:
            self._logger.error(
                PARSE_FAILURE_MESSAGE,
                request_id=request_id,
                error=str(e),
            )
            raise_parsing_error(
                service=ServiceName.GATEWAY.value,
                operation="fetch_time",
                parse_target="TimeResult",
                message=PARSE_FAILURE_MESSAGE,
                correlation_id=request_id,
                validation_errors=e.error_count(),
            )

        self._logger.info(
            "Successfully received response from API2",
            request_id=request_id,
            timestamp=result.timestamp,
        )
        return result

    def _record_call(self, status: str, started: float) -> None:
        self._metrics.downstream_service_calls_total.labels(
            service=ServiceName.PROVIDER.value,
            method="GET",
            endpoint=TIME_ENDPOINT,
            status_code=status,
        ).inc()
        self._metrics.downstream_service_call_duration_seconds.labels(
            service=ServiceName.PROVIDER.value,
            method="GET",
            endpoint=TIME_ENDPOINT,
        ).observe(time.perf_counter() - started)

    def _timeout_seconds(self) -> float:
        return self._client.timeout.read or 0.0
