"""Tracing for the search service.

Built by the lifespan only when TELEMETRY_ENABLED is set. Spans from the
API, the search passes and the SQL they issue share one tracer provider.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

HEALTH_PATHS = "/api/v1/health"


def _span_exporter(kind: str, otlp_endpoint: str | None) -> SpanExporter | None:
    """Exporter for TELEMETRY_EXPORTER; None means spans are recorded but not shipped."""
    if kind == "none":
        return None
    if kind == "otlp":
        if not otlp_endpoint:
            raise ValueError("TELEMETRY_OTLP_ENDPOINT is required for the otlp exporter")
        return OTLPSpanExporter(
            endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
        )
    if kind != "console":
        logger.warning("Unknown exporter %r, falling back to console", kind)
    return ConsoleSpanExporter()


class Telemetry:
    """Owns the tracer provider for one app run."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str,
        sample_rate: float = 1.0,
    ) -> None:
        self.provider = TracerProvider(
            resource=Resource(
                attributes={
                    SERVICE_NAME: service_name,
                    SERVICE_VERSION: service_version,
                    "deployment.environment": environment,
                }
            ),
            sampler=TraceIdRatioBased(sample_rate),
        )

    def start(self, exporter: str, otlp_endpoint: str | None = None) -> None:
        """Attach the exporter and make this the global provider."""
        span_exporter = _span_exporter(exporter, otlp_endpoint)
        if span_exporter is not None:
            self.provider.add_span_processor(BatchSpanProcessor(span_exporter))
        trace.set_tracer_provider(self.provider)
        logger.info("Tracing started (exporter=%s)", exporter)

    def instrument_sqlalchemy(self, engine: AsyncEngine) -> None:
        SQLAlchemyInstrumentor().instrument(
            engine=engine.sync_engine,
            tracer_provider=self.provider,
            enable_commenter=True,
        )

    def instrument_logging(self) -> None:
        """Stamp trace_id and span_id on log records."""
        LoggingInstrumentor().instrument(
            tracer_provider=self.provider, set_logging_format=True
        )

    def shutdown(self) -> None:
        """Flush pending spans."""
        self.provider.shutdown()
        logger.info("Tracing stopped")


_telemetry: Telemetry | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> Telemetry | None:
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: Telemetry | None) -> None:
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every route except health checks.

    Must run while the app is built: middleware cannot be added once it
    has started. Spans go to whatever global provider the lifespan sets.
    """
    FastAPIInstrumentor.instrument_app(app, excluded_urls=HEALTH_PATHS)
