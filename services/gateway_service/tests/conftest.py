"""
Test configuration for the Gateway Service.

GatewayTestProvider mirrors the production GatewayServiceProvider. The
Provider client is the real httpx-backed implementation; tests intercept its
outbound calls with respx.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import httpx
import pytest
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from dishka.integrations.fastapi import FastapiProvider
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from prometheus_client import CollectorRegistry
from structlog.stdlib import BoundLogger

from services.gateway_service.app.main import create_app
from services.gateway_service.app.metrics import GatewayMetrics
from services.gateway_service.config import Settings
from services.gateway_service.implementations.provider_http_client import ProviderHttpClient
from services.gateway_service.protocols import ProviderClientProtocol

PROVIDER_URL = "http://provider.test:4000"


class GatewayTestProvider(Provider):
    """Mirrors GatewayServiceProvider with an injected logger and isolated registry."""

    scope = Scope.APP

    def __init__(self, settings: Settings, logger: Any) -> None:
        super().__init__()
        self._settings = settings
        self._logger = logger

    @provide
    def get_config(self) -> Settings:
        return self._settings

    @provide
    def provide_logger(self) -> BoundLogger:
        return self._logger

    @provide
    def provide_registry(self) -> CollectorRegistry:
        """Isolated registry per test."""
        return CollectorRegistry()

    @provide
    def provide_metrics(self, registry: CollectorRegistry) -> GatewayMetrics:
        return GatewayMetrics(registry=registry)

    @provide
    async def get_provider_client(
        self, config: Settings, metrics: GatewayMetrics, logger: BoundLogger
    ) -> AsyncIterator[ProviderClientProtocol]:
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            ),
            follow_redirects=True,
        ) as httpx_client:
            yield ProviderHttpClient(
                httpx_client, base_url=config.PROVIDER_URL, metrics=metrics, logger=logger
            )


@pytest.fixture
def gateway_settings() -> Settings:
    return Settings(
        API2_URL=PROVIDER_URL,
        HTTP_CLIENT_TIMEOUT_SECONDS=2.0,
        HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS=1.0,
    )


@pytest.fixture
async def gateway_container(
    gateway_settings: Settings, service_logger: Any
) -> AsyncIterator[AsyncContainer]:
    container = make_async_container(
        GatewayTestProvider(gateway_settings, service_logger),
        FastapiProvider(),  # Required for Request context
    )
    yield container
    await container.close()


@pytest.fixture
def gateway_app(gateway_settings: Settings, gateway_container: AsyncContainer) -> FastAPI:
    return create_app(settings=gateway_settings, container=gateway_container)


@pytest.fixture
async def client(gateway_app: FastAPI) -> AsyncIterator[AsyncClient]:
    async with AsyncClient(transport=ASGITransport(app=gateway_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def gateway_registry(gateway_container: AsyncContainer) -> CollectorRegistry:
    return await gateway_container.get(CollectorRegistry)
