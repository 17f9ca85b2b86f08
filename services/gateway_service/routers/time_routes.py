"""Time relay route for the Gateway Service."""

from __future__ import annotations

from common_core.error_enums import ErrorCode
from common_core.time_models import ErrorResult, TimeResult, TimeSource
from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from structlog.stdlib import BoundLogger

from clockrelay_service_libs.error_handling import ClockRelayError
from services.gateway_service.app.metrics import GatewayMetrics
from services.gateway_service.app.middleware import get_request_id
from services.gateway_service.protocols import ProviderClientProtocol

DEFAULT_TIMEZONE = "UTC"

# Provider failures by error code; anything else is a 500
STATUS_BY_ERROR_CODE: dict[ErrorCode, int] = {
    ErrorCode.CONNECTION_ERROR: 503,
    ErrorCode.TIMEOUT: 503,
    ErrorCode.EXTERNAL_SERVICE_ERROR: 502,
    ErrorCode.PARSING_ERROR: 500,
}

router = APIRouter(tags=["Time"])


@router.get(
    "/time",
    response_model=TimeResult,
    responses={
        500: {"model": ErrorResult, "description": "Provider response could not be parsed"},
        502: {"model": ErrorResult, "description": "Provider returned a non-2xx status"},
        503: {"model": ErrorResult, "description": "Provider could not be reached"},
    },
)
@inject
async def get_time(
    request: Request,
    provider_client: FromDishka[ProviderClientProtocol],
    metrics: FromDishka[GatewayMetrics],
    logger: FromDishka[BoundLogger],
    timezone_name: str = Query(default=DEFAULT_TIMEZONE, alias="timezone"),
) -> TimeResult | JSONResponse:
    """Relay a time request to the Provider Service under the Gateway's request id."""
    request_id = get_request_id(request)
    logger.info("Received time request", request_id=request_id, timezone=timezone_name)

    try:
        upstream = await provider_client.fetch_time(timezone_name, request_id)
    except ClockRelayError as e:
        status_code = STATUS_BY_ERROR_CODE.get(e.error_detail.error_code, 500)
        metrics.api_errors_total.labels(endpoint="/time", error_type=e.error_code).inc()
        logger.warning(
            "Time request failed",
            request_id=request_id,
            error_code=e.error_code,
            status_code=status_code,
        )
        body = ErrorResult(error=e.error_detail.message, request_id=request_id)
        return JSONResponse(status_code=status_code, content=body.model_dump())

    # The Provider's echoed request_id is discarded in favour of ours
    return TimeResult(
        timestamp=upstream.timestamp,
        timezone=upstream.timezone,
        request_id=request_id,
        source=TimeSource.GATEWAY_RELAY.value,
    )
