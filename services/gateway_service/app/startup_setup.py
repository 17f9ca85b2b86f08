"""Startup setup for the Gateway Service."""

from __future__ import annotations

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clockrelay_service_libs.logging_utils import create_service_logger
from services.gateway_service.app.di import GatewayServiceProvider
from services.gateway_service.app.middleware import REQUEST_ID_HEADER
from services.gateway_service.config import Settings

logger = create_service_logger("gateway.startup")


def create_di_container(settings: Settings) -> AsyncContainer:
    """Create and configure the DI container."""
    try:
        logger.info("Creating DI container...")
        container = make_async_container(
            GatewayServiceProvider(settings),
            FastapiProvider(),  # Provides Request object to context
        )
        logger.info("DI container created successfully")
        return container
    except Exception as e:
        logger.critical(f"Failed to create DI container: {e}", exc_info=True)
        raise


def setup_dependency_injection(app: FastAPI, container: AsyncContainer) -> None:
    """Setup Dishka integration with FastAPI."""
    try:
        logger.info("Setting up dependency injection...")
        setup_dishka(container, app)
        logger.info("Dependency injection setup completed")
    except Exception as e:
        logger.critical(f"Failed to setup dependency injection: {e}", exc_info=True)
        raise


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Allow any origin, method and header unless settings narrow it."""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
        expose_headers=[REQUEST_ID_HEADER],
    )


async def shutdown_services(container: AsyncContainer) -> None:
    """Close the DI container, releasing the pooled Provider client."""
    await container.close()
    logger.info("Gateway Service shutdown completed")
