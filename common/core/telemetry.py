from typing import Dict, Optional
import functools
import asyncio
import logging
import threading

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.resources import Resource, SERVICE_NAME, SERVICE_VERSION
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

from common.core.config import settings


# Global flag to ensure initialization only happens once
_initialized = False
_init_lock = threading.Lock()
tracer: Optional[trace.Tracer] = None


def _exporter_headers() -> Dict[str, str]:
    if not settings.otel_exporter_token:
        return {}
    return {"Authorization": f"Bearer {settings.otel_exporter_token}"}


def _initialize_telemetry():
    """Initialize logging and tracing once and only once."""
    global _initialized, tracer

    with _init_lock:
        if _initialized:
            return

        logging.basicConfig(
            level=settings.log_level.upper(),
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )

        resource = Resource(
            attributes={
                SERVICE_NAME: settings.otel_service_name,
                SERVICE_VERSION: settings.otel_service_version,
            }
        )
        provider = TracerProvider(resource=resource)

        # Spans are only shipped when an OTLP endpoint is configured
        if settings.otel_exporter_endpoint:
            exporter = OTLPSpanExporter(
                endpoint=settings.otel_exporter_endpoint,
                headers=_exporter_headers(),
            )
            provider.add_span_processor(BatchSpanProcessor(exporter))

        trace.set_tracer_provider(provider)
        tracer = trace.get_tracer(settings.otel_service_name)

        _initialized = True
        logging.getLogger(__name__).info(
            "Telemetry initialized",
            extra={"otlp_export": bool(settings.otel_exporter_endpoint)},
        )


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance. Ensures telemetry is initialized.
    Use this instead of logging.getLogger() directly.
    """
    if not _initialized:
        _initialize_telemetry()
    return logging.getLogger(name)


def _get_tracer() -> trace.Tracer:
    if not _initialized:
        _initialize_telemetry()
    return tracer


def _span_name(func, args) -> str:
    # Include the class name for bound methods
    if args and hasattr(args[0], func.__name__):
        return f"{args[0].__class__.__name__}.{func.__name__}"
    return func.__name__


def trace_span(func):
    """Decorator that automatically creates a span with the function name."""

    @functools.wraps(func)
    def sync_wrapper(*args, **kwargs):
        with _get_tracer().start_as_current_span(_span_name(func, args)):
            return func(*args, **kwargs)

    @functools.wraps(func)
    async def async_wrapper(*args, **kwargs):
        with _get_tracer().start_as_current_span(_span_name(func, args)):
            return await func(*args, **kwargs)

    if asyncio.iscoroutinefunction(func):
        return async_wrapper
    else:
        return sync_wrapper
