"""
Metrics Collection
Prometheus metrics for prototype service tracking
"""

import time
from collections.abc import Iterable

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the prototype service.
    """

    content_type = CONTENT_TYPE_LATEST

    def __init__(self) -> None:
        # Prototype operations
        self.operations_total = Counter(
            "quickproto_operations_total",
            "Total number of prototype operations",
            ["operation", "status"],
        )
        self.operation_duration = Histogram(
            "quickproto_operation_duration_seconds",
            "Prototype operation duration in seconds",
            ["operation"],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
        )

        # Generation
        self.components_generated = Counter(
            "quickproto_components_generated_total",
            "Generated UI components by type",
            ["type"],
        )

        # Error metrics
        self.errors_total = Counter(
            "quickproto_errors_total",
            "Total number of errors",
            ["error_type", "component"],
        )

        # System metrics
        self.uptime = Gauge(
            "quickproto_uptime_seconds",
            "Service uptime in seconds",
        )
        self.start_time = time.time()

    def record_operation(self, operation: str, status: str, duration: float) -> None:
        """Record a prototype operation."""
        self.operations_total.labels(operation=operation, status=status).inc()
        self.operation_duration.labels(operation=operation).observe(duration)

    def record_components(self, component_types: Iterable[str]) -> None:
        """Count the component types of a generated configuration."""
        for component_type in component_types:
            self.components_generated.labels(type=component_type).inc()

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, component=component).inc()

    def update_uptime(self) -> None:
        """Update the uptime metric."""
        self.uptime.set(time.time() - self.start_time)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.update_uptime()
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
