"""
ClockRelay Provider Service Application.

Computes the current time for a requested timezone. Built through
create_app() so the process entry point (see services.cli) decides how
logging, settings and the DI container are constructed.
"""

from __future__ import annotations

from dishka import AsyncContainer
from quart_dishka import QuartDishka

from clockrelay_service_libs.logging_utils import create_service_logger
from clockrelay_service_libs.quart_app import ClockRelayQuartApp
from services.provider_service import startup_setup
from services.provider_service.api.health_routes import health_bp
from services.provider_service.api.time_routes import time_bp
from services.provider_service.config import Settings, get_settings

logger = create_service_logger("provider.app")


def create_app(
    settings: Settings | None = None,
    container: AsyncContainer | None = None,
) -> ClockRelayQuartApp:
    """Create and configure the Provider Service Quart application."""
    settings = settings or get_settings()

    app = ClockRelayQuartApp(__name__)
    app.container = container or startup_setup.create_di_container(settings)
    QuartDishka(app=app, container=app.container)

    @app.before_serving
    async def startup() -> None:
        logger.info(
            "Provider Service startup completed successfully",
            service=settings.SERVICE_NAME,
            bind=settings.bind_address,
        )

    @app.after_serving
    async def shutdown() -> None:
        await startup_setup.shutdown_services(app.container)
        logger.info("Provider Service shutdown completed")

    app.register_blueprint(health_bp)
    app.register_blueprint(time_bp)

    startup_setup.setup_cors(app, settings)
    return app
