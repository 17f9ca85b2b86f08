"""Descriptor, health and metrics routes for the Provider Service."""

from __future__ import annotations

from common_core.time_models import HealthStatus
from dishka import FromDishka
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest
from quart import Blueprint, Response, jsonify
from quart_dishka import inject

from services.provider_service.config import Settings

ROOT_DESCRIPTOR = "API2 - Time Service Provider"

health_bp = Blueprint("health_routes", __name__)


@health_bp.route("/")
async def root() -> Response:
    return Response(ROOT_DESCRIPTOR, content_type="text/plain; charset=utf-8")


@health_bp.route("/health")
@inject
async def health_check(settings: FromDishka[Settings]) -> tuple[Response, int]:
    """Static liveness check; never touches downstream dependencies."""
    health = HealthStatus(service=settings.SERVICE_NAME)
    return jsonify(health.model_dump()), 200


@health_bp.route("/metrics")
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> Response:
    """Prometheus metrics endpoint."""
    return Response(generate_latest(registry), content_type=CONTENT_TYPE_LATEST)
