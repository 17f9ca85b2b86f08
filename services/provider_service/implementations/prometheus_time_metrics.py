"""Prometheus-based time request metrics implementation."""

from __future__ import annotations

from prometheus_client import Counter

from clockrelay_service_libs.logging_utils import create_service_logger
from services.provider_service.protocols import TimeMetricsProtocol

logger = create_service_logger("provider.metrics.prometheus")


class PrometheusTimeMetrics(TimeMetricsProtocol):
    """Prometheus-based implementation of time request metrics collection."""

    def __init__(self, time_requests_counter: Counter) -> None:
        """
        Initialize Prometheus time metrics.

        Args:
            time_requests_counter: Counter labelled by resolved_zone and supported
        """
        self.time_requests = time_requests_counter

    def record_time_request(self, resolved_zone: str, supported: bool) -> None:
        try:
            self.time_requests.labels(
                resolved_zone=resolved_zone, supported=str(supported).lower()
            ).inc()
        except Exception as e:
            logger.error(f"Error recording time request metric: {e}")
