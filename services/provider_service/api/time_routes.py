"""Time resolution routes for the Provider Service."""

from __future__ import annotations

import uuid

from common_core.time_models import TimeResult, TimeSource
from dishka import FromDishka
from quart import Blueprint, Response, jsonify, request
from quart_dishka import inject
from structlog.stdlib import BoundLogger

from services.provider_service.protocols import TimeMetricsProtocol, TimeResolverProtocol

DEFAULT_TIMEZONE = "UTC"

time_bp = Blueprint("time_routes", __name__)


@time_bp.route("/time", methods=["GET"])
@inject
async def get_time(
    resolver: FromDishka[TimeResolverProtocol],
    metrics: FromDishka[TimeMetricsProtocol],
    logger: FromDishka[BoundLogger],
) -> tuple[Response, int]:
    """Return the current time in the requested timezone.

    A ``request_id`` supplied by the caller (normally the Gateway) is reused
    unchanged so both hops log under the same identifier.
    """
    request_id = request.args.get("request_id")
    if request_id is None:
        request_id = str(uuid.uuid4())
    timezone_name = request.args.get("timezone", DEFAULT_TIMEZONE)

    logger.info("Processing time request", request_id=request_id, timezone=timezone_name)

    resolved = resolver.resolve(timezone_name)
    if not resolved.supported:
        logger.info(
            "Unsupported timezone, defaulting to UTC",
            request_id=request_id,
            timezone=timezone_name,
        )

    timestamp = resolver.now(resolved).isoformat()
    metrics.record_time_request(resolved.zone_name, resolved.supported)

    result = TimeResult(
        timestamp=timestamp,
        timezone=timezone_name,
        request_id=request_id,
        source=TimeSource.PROVIDER.value,
    )

    logger.info(
        "Time request processed successfully",
        request_id=request_id,
        timestamp=timestamp,
        timezone=timezone_name,
    )
    return jsonify(result.model_dump()), 200
