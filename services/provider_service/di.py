"""
Provider Service dependency injection configuration.
"""

from __future__ import annotations

from dishka import Provider, Scope, provide
from prometheus_client import CollectorRegistry, Counter
from structlog.stdlib import BoundLogger

from clockrelay_service_libs.logging_utils import create_service_logger
from services.provider_service.config import Settings
from services.provider_service.implementations.prometheus_time_metrics import (
    PrometheusTimeMetrics,
)
from services.provider_service.implementations.zoneinfo_time_resolver import (
    ZoneInfoTimeResolver,
)
from services.provider_service.protocols import TimeMetricsProtocol, TimeResolverProtocol


class ProviderServiceProvider(Provider):
    """DI provider for Provider Service dependencies."""

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide the settings instance built at startup."""
        return self._settings

    @provide(scope=Scope.APP)
    def provide_logger(self) -> BoundLogger:
        """Provide the logger handed to request handlers."""
        return create_service_logger("provider.api")

    @provide(scope=Scope.APP)
    def provide_collector_registry(self) -> CollectorRegistry:
        """Provide Prometheus collector registry."""
        return CollectorRegistry()

    @provide(scope=Scope.APP)
    def provide_time_metrics(self, registry: CollectorRegistry) -> TimeMetricsProtocol:
        """Provide time request metrics implementation."""
        time_requests = Counter(
            "provider_time_requests_total",
            "Total time requests served by the Provider Service",
            ["resolved_zone", "supported"],
            registry=registry,
        )
        return PrometheusTimeMetrics(time_requests)

    @provide(scope=Scope.APP)
    def provide_time_resolver(self) -> TimeResolverProtocol:
        """Provide zoneinfo-backed timezone resolver."""
        return ZoneInfoTimeResolver()
