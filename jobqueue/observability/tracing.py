"""
OpenTelemetry tracing setup.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Span, Tracer

from jobqueue import __version__
from jobqueue.config import get_settings

_tracer: Tracer | None = None


def setup_tracing(enable_console_export: bool = False) -> Tracer:
    """
    Set up OpenTelemetry tracing.

    The OTLP exporter is only installed when ``otel_enabled`` is set;
    otherwise spans go to the API's default no-op provider.

    Args:
        enable_console_export: If True, also export spans to console.

    Returns:
        Tracer: The tracer instance.
    """
    global _tracer

    settings = get_settings()

    if settings.otel_enabled or enable_console_export:
        resource = Resource.create(
            {
                "service.name": settings.otel_service_name,
                "service.version": __version__,
            }
        )
        provider = TracerProvider(resource=resource)

        if settings.otel_enabled:
            provider.add_span_processor(
                BatchSpanProcessor(
                    OTLPSpanExporter(
                        endpoint=settings.otel_exporter_otlp_endpoint,
                        insecure=True,
                    )
                )
            )

        if enable_console_export:
            provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

        trace.set_tracer_provider(provider)

    _tracer = trace.get_tracer(settings.otel_service_name)
    return _tracer


def instrument_fastapi(app: Any) -> None:
    """
    Instrument FastAPI application with OpenTelemetry.

    Args:
        app: The FastAPI application instance.
    """
    FastAPIInstrumentor.instrument_app(app)


def get_tracer() -> Tracer:
    """
    Get the tracer instance.

    Returns:
        Tracer: The configured tracer, or one from the global provider if
        tracing has not been set up.
    """
    if _tracer is None:
        return trace.get_tracer(get_settings().otel_service_name)
    return _tracer


@contextmanager
def start_span(name: str, **attributes: Any) -> Iterator[Span]:
    """
    Open a span as the current span.

    Args:
        name: Span name.
        **attributes: Span attributes; None values are skipped.

    Yields:
        The active span.
    """
    with get_tracer().start_as_current_span(name) as span:
        for key, value in attributes.items():
            if value is not None:
                span.set_attribute(key, str(value))
        yield span
