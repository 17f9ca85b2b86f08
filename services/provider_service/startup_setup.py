"""Startup and shutdown logic for the Provider Service."""

from __future__ import annotations

from dishka import AsyncContainer, make_async_container
from starlette.middleware.cors import CORSMiddleware

from clockrelay_service_libs.logging_utils import create_service_logger
from clockrelay_service_libs.quart_app import ClockRelayQuartApp
from services.provider_service.config import Settings
from services.provider_service.di import ProviderServiceProvider

logger = create_service_logger("provider.startup")


def create_di_container(settings: Settings) -> AsyncContainer:
    """Creates and returns the DI AsyncContainer."""
    container = make_async_container(ProviderServiceProvider(settings))
    logger.info("DI AsyncContainer created.")
    return container


def setup_cors(app: ClockRelayQuartApp, settings: Settings) -> None:
    """Wrap the ASGI callable with permissive CORS handling."""
    app.asgi_app = CORSMiddleware(  # type: ignore[method-assign]
        app.asgi_app,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )


async def shutdown_services(container: AsyncContainer) -> None:
    """Gracefully close the Provider Service's DI container."""
    try:
        await container.close()
        logger.info("Provider Service DI container closed")
    except Exception as e:
        logger.error(f"Error during Provider Service shutdown: {e}", exc_info=True)
