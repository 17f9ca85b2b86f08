"""Verify the production Gateway Service container wires every dependency."""

from __future__ import annotations

from dishka import make_async_container
from prometheus_client import CollectorRegistry

from services.gateway_service.app.di import GatewayServiceProvider
from services.gateway_service.app.metrics import GatewayMetrics
from services.gateway_service.config import Settings
from services.gateway_service.implementations.provider_http_client import ProviderHttpClient
from services.gateway_service.protocols import ProviderClientProtocol


async def test_production_provider_resolves_provider_client() -> None:
    settings = Settings(
        API2_URL="http://api2:4000",
        HTTP_CLIENT_TIMEOUT_SECONDS=10.0,
        HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS=5.0,
    )
    container = make_async_container(GatewayServiceProvider(settings))
    try:
        assert await container.get(Settings) is settings
        provider_client = await container.get(ProviderClientProtocol)
        assert isinstance(provider_client, ProviderHttpClient)
        assert provider_client is await container.get(ProviderClientProtocol)
        assert isinstance(await container.get(GatewayMetrics), GatewayMetrics)
        assert await container.get(CollectorRegistry) is await container.get(CollectorRegistry)
    finally:
        await container.close()
