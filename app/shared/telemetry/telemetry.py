"""OpenTelemetry tracing for the store-opening engine.

Spans cover HTTP requests (FastAPI instrumentation) and the engine use cases
(@traced). Spans go to the console in development or to an OTLP gRPC
collector; "none" keeps a provider (for trace ids in logs) without export.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

logger = logging.getLogger(__name__)

# Health probes are polled constantly and carry no engine work.
_EXCLUDED_URLS = "/api/v1/health,/api/v1/health/ready"


class TelemetryConfig:
    """Owns the tracer provider and the instrumentations applied at startup."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    def _exporter(self, exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
        if exporter_type == "none":
            return None
        if exporter_type == "otlp":
            if otlp_endpoint:
                return OTLPSpanExporter(
                    endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://")
                )
            logger.warning("OTLP exporter selected without an endpoint; falling back to console")
        return ConsoleSpanExporter()

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """Create the tracer provider and register it globally.

        Args:
            exporter_type: "console", "otlp" or "none".
            otlp_endpoint: Collector address for "otlp" (e.g. http://otel:4317).
            sample_rate: Fraction of traces kept, 0.0-1.0.

        Returns:
            The provider, or None when telemetry is disabled or setup failed.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None
        resource = Resource(
            attributes={
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                "deployment.environment": self.environment,
            }
        )
        try:
            provider = TracerProvider(resource=resource, sampler=TraceIdRatioBased(sample_rate))
            exporter = self._exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception:
            logger.exception("Telemetry setup failed; continuing without tracing")
            return None
        self.tracer_provider = provider
        logger.info(
            "Tracing enabled for %s %s (exporter=%s, sample_rate=%s)",
            self.service_name,
            self.service_version,
            exporter_type,
            sample_rate,
        )
        return provider

    def instrument_fastapi(self, app: FastAPI) -> None:
        """Trace every request except health probes."""
        if self.tracer_provider is None:
            return
        try:
            FastAPIInstrumentor.instrument_app(
                app, tracer_provider=self.tracer_provider, excluded_urls=_EXCLUDED_URLS
            )
        except Exception:
            logger.exception("FastAPI instrumentation failed")

    def instrument_logging(self) -> None:
        """Inject trace and span ids into log records."""
        if self.tracer_provider is None:
            return
        try:
            LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider, set_logging_format=False
            )
        except Exception:
            logger.exception("Logging instrumentation failed")

    def shutdown(self) -> None:
        """Flush pending spans and release the provider."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception:
            logger.exception("Telemetry shutdown failed")
        self.tracer_provider = None


_telemetry: TelemetryConfig | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> TelemetryConfig | None:
    """Return the telemetry registered at startup, if any."""
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None) -> None:
    """Register (or clear, with None) the process-wide telemetry."""
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
