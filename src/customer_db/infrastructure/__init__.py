"""Infrastructure layer - cross-cutting concerns."""

from customer_db.infrastructure.config import Config, get_config
from customer_db.infrastructure.container import Container
from customer_db.infrastructure.logging import bind_run_context, get_logger, setup_logging
from customer_db.infrastructure.metrics import setup_metrics, get_metrics, MetricsRegistry
from customer_db.infrastructure.tracing import setup_tracing, get_tracer, trace_span

__all__ = [
    "Config",
    "get_config",
    "Container",
    "setup_logging",
    "bind_run_context",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "trace_span",
]
