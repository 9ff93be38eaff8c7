"""OpenTelemetry tracing.

Spans are always created through the API tracer; they are only exported
once setup_tracing() has installed an SDK provider with an exporter.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from customer_db.infrastructure.config import ObservabilityConfig

TRACER_NAME = "customer_db"

AttributeValue = str | bool | int | float


def setup_tracing(
    observability: ObservabilityConfig,
    console_export: bool = False,
) -> TracerProvider | None:
    """
    Install an SDK tracer provider for the configured collector.

    Args:
        observability: Supplies otel_endpoint and otel_service_name
        console_export: Also print finished spans to stdout

    Returns:
        The installed provider, or None when there is nowhere to export to
        (no endpoint and no console export).
    """
    if not observability.otel_endpoint and not console_export:
        return None

    from customer_db import __version__

    provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": observability.otel_service_name,
                "service.version": __version__,
            }
        )
    )
    if observability.otel_endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=observability.otel_endpoint, insecure=True))
        )
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    return provider


def get_tracer() -> trace.Tracer:
    """Tracer from whichever provider is currently installed."""
    return trace.get_tracer(TRACER_NAME)


@contextmanager
def trace_span(
    name: str,
    **attributes: AttributeValue | None,
) -> Generator[trace.Span, None, None]:
    """
    Run the enclosed block in a span.

    Attributes whose value is None are not recorded.
    """
    with get_tracer().start_as_current_span(name) as span:
        for key, value in attributes.items():
            if value is not None:
                span.set_attribute(key, value)
        yield span
