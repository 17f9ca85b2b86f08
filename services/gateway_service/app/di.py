"""
Gateway Service dependency injection configuration.
"""

from __future__ import annotations

from collections.abc import AsyncIterator

import httpx
from dishka import Provider, Scope, provide
from prometheus_client import CollectorRegistry
from structlog.stdlib import BoundLogger

from clockrelay_service_libs.logging_utils import create_service_logger
from services.gateway_service.app.metrics import GatewayMetrics
from services.gateway_service.config import Settings
from services.gateway_service.implementations.provider_http_client import ProviderHttpClient
from services.gateway_service.protocols import ProviderClientProtocol


class GatewayServiceProvider(Provider):
    scope = Scope.APP

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings

    @provide
    def get_config(self) -> Settings:
        return self._settings

    @provide
    def provide_logger(self) -> BoundLogger:
        return create_service_logger("gateway.api")

    @provide
    def provide_registry(self) -> CollectorRegistry:
        return CollectorRegistry()

    @provide
    def provide_metrics(self, registry: CollectorRegistry) -> GatewayMetrics:
        return GatewayMetrics(registry=registry)

    @provide
    async def get_provider_client(
        self, config: Settings, metrics: GatewayMetrics, logger: BoundLogger
    ) -> AsyncIterator[ProviderClientProtocol]:
        # One pooled client for the lifetime of the container
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            ),
            follow_redirects=True,
        ) as httpx_client:
            yield ProviderHttpClient(
                httpx_client,
                base_url=config.PROVIDER_URL,
                metrics=metrics,
                logger=logger,
            )
