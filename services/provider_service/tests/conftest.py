"""
Test configuration for the Provider Service.

ProviderTestProvider mirrors the production ProviderServiceProvider so the
routes resolve the same protocol types they do in production.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

import pytest
from dishka import AsyncContainer, Provider, Scope, make_async_container, provide
from prometheus_client import CollectorRegistry, Counter
from quart.typing import TestClientProtocol
from structlog.stdlib import BoundLogger

from clockrelay_service_libs.quart_app import ClockRelayQuartApp
from services.provider_service.app import create_app
from services.provider_service.config import Settings
from services.provider_service.implementations.prometheus_time_metrics import (
    PrometheusTimeMetrics,
)
from services.provider_service.implementations.zoneinfo_time_resolver import (
    ZoneInfoTimeResolver,
)
from services.provider_service.protocols import TimeMetricsProtocol, TimeResolverProtocol


class ProviderTestProvider(Provider):
    """Test provider with an injectable logger and resolver."""

    def __init__(
        self,
        settings: Settings,
        logger: Any,
        resolver: TimeResolverProtocol | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings
        self._logger = logger
        self._resolver = resolver or ZoneInfoTimeResolver()

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self._settings

    @provide(scope=Scope.APP)
    def provide_logger(self) -> BoundLogger:
        return self._logger

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Isolated registry per test."""
        return CollectorRegistry()

    @provide(scope=Scope.APP)
    def provide_time_metrics(self, registry: CollectorRegistry) -> TimeMetricsProtocol:
        counter = Counter(
            "provider_time_requests_total",
            "Total time requests served by the Provider Service",
            ["resolved_zone", "supported"],
            registry=registry,
        )
        return PrometheusTimeMetrics(counter)

    @provide(scope=Scope.APP)
    def provide_time_resolver(self) -> TimeResolverProtocol:
        return self._resolver


@pytest.fixture
def provider_settings() -> Settings:
    return Settings(SERVICE_NAME="api2", HTTP_PORT=4000)


@pytest.fixture
def time_resolver() -> TimeResolverProtocol:
    return ZoneInfoTimeResolver()


@pytest.fixture
async def provider_container(
    provider_settings: Settings,
    service_logger: Any,
    time_resolver: TimeResolverProtocol,
) -> AsyncIterator[AsyncContainer]:
    container = make_async_container(
        ProviderTestProvider(provider_settings, service_logger, time_resolver)
    )
    yield container
    await container.close()


@pytest.fixture
def provider_app(
    provider_settings: Settings, provider_container: AsyncContainer
) -> ClockRelayQuartApp:
    return create_app(settings=provider_settings, container=provider_container)


@pytest.fixture
async def client(provider_app: ClockRelayQuartApp) -> AsyncIterator[TestClientProtocol]:
    async with provider_app.test_client() as test_client:
        yield test_client
