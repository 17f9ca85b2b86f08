"""Descriptor, health and metrics routes for the Gateway Service."""

from __future__ import annotations

from common_core.time_models import HealthStatus
from dishka import FromDishka
from dishka.integrations.fastapi import inject
from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, CollectorRegistry, generate_latest

from services.gateway_service.config import Settings

ROOT_DESCRIPTOR = "API1 - Time Service Gateway"

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse)
async def root() -> str:
    return ROOT_DESCRIPTOR


@router.get("/health", response_model=HealthStatus)
@inject
async def health_check(settings: FromDishka[Settings]) -> HealthStatus:
    """Liveness only; the Provider is not probed."""
    return HealthStatus(service=settings.SERVICE_NAME)


@router.get("/metrics", response_class=PlainTextResponse)
@inject
async def metrics(registry: FromDishka[CollectorRegistry]) -> PlainTextResponse:
    """Prometheus metrics endpoint."""
    return PlainTextResponse(content=generate_latest(registry), media_type=CONTENT_TYPE_LATEST)
