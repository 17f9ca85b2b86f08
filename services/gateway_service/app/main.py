"""
ClockRelay Gateway Service Application.

Externally facing relay: accepts time requests, forwards them to the
Provider Service and re-wraps the answer under the Gateway's own request id.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI

from clockrelay_service_libs.logging_utils import create_service_logger
from services.gateway_service.app.middleware import RequestIdMiddleware
from services.gateway_service.app.startup_setup import (
    create_di_container,
    setup_cors,
    setup_dependency_injection,
    shutdown_services,
)
from services.gateway_service.config import Settings, get_settings
from services.gateway_service.routers import time_routes
from services.gateway_service.routers.health_routes import router as health_router

logger = create_service_logger("gateway.app")


def create_app(
    settings: Settings | None = None,
    container: AsyncContainer | None = None,
) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Gateway Service startup completed successfully",
            service=settings.SERVICE_NAME,
            bind=settings.bind_address,
            provider_url=settings.PROVIDER_URL,
        )
        yield
        await shutdown_services(app.state.di_container)

    app = FastAPI(
        title=settings.SERVICE_NAME,
        version="1.0.0",
        description="ClockRelay Gateway - relays time requests to the Provider Service",
        lifespan=lifespan,
    )

    # Request id must be minted before any handler runs
    app.add_middleware(RequestIdMiddleware)

    setup_cors(app, settings)

    app.include_router(health_router, tags=["Health"])
    app.include_router(time_routes.router, tags=["Time"])

    container = container or create_di_container(settings)
    setup_dependency_injection(app, container)

    # Store container reference for cleanup
    app.state.di_container = container

    return app
