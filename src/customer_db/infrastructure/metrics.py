"""Prometheus metrics for the customer database."""

from __future__ import annotations

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    start_http_server,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all customer database metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Command metrics
        self.commands_total = Counter(
            "customer_db_commands_total",
            "Total number of command lines processed",
            ["verb", "outcome"],  # outcome: applied, ignored, error
            registry=self._registry,
        )

        self.command_latency_seconds = Histogram(
            "customer_db_command_latency_seconds",
            "Command execution latency in seconds",
            ["verb"],
            buckets=(0.00001, 0.00005, 0.0001, 0.0005, 0.001, 0.005, 0.01, 0.05, 0.1),
            registry=self._registry,
        )

        # Table metrics
        self.records = Gauge(
            "customer_db_records",
            "Number of live customer records",
            registry=self._registry,
        )

        self.table_capacity = Gauge(
            "customer_db_table_capacity",
            "Allocated customer table slots",
            registry=self._registry,
        )

        self.seed_records_total = Counter(
            "customer_db_seed_records_total",
            "Total records loaded from seed data",
            registry=self._registry,
        )

        # Output metrics
        self.snapshot_blocks_total = Counter(
            "customer_db_snapshot_blocks_total",
            "Total snapshot blocks written",
            ["kind"],  # initial, table, error
            registry=self._registry,
        )

        # Build info
        self.info = Info(
            "customer_db",
            "Customer database information",
            registry=self._registry,
        )


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(port: int | None = None, registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up the metrics registry and, if a port is given, the Prometheus exporter.

    The process-wide registry is created once and reused on later calls.

    Args:
        port: Port for the metrics HTTP server, or None to skip it
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    if _metrics is None or registry is not None:
        _metrics = MetricsRegistry(registry)

    # Set build info
    from customer_db import __version__
    _metrics.info.info({
        "version": __version__,
    })

    if port is not None:
        start_http_server(port, registry=registry or REGISTRY)

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
