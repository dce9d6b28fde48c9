"""OpenTelemetry tracer provider for the proof-of-funds client.

Built from Settings: TELEMETRY_EXPORTER picks console, otlp (gRPC) or none,
TELEMETRY_SAMPLE_RATE sets the ratio sampler. Spans come from the @traced
backend operations.
"""

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased

from pof_client.core.config import Settings
from pof_client.shared.telemetry.logging import get_logger

logger = get_logger(__name__)


def _span_exporter(settings: Settings) -> SpanExporter | None:
    """Exporter for settings.telemetry_exporter; None for "none".

    Settings has already rejected unknown exporters and otlp without an endpoint.
    """
    if settings.telemetry_exporter == "console":
        return ConsoleSpanExporter()
    if settings.telemetry_exporter == "otlp":
        endpoint = settings.telemetry_otlp_endpoint
        return OTLPSpanExporter(endpoint=endpoint, insecure=endpoint.startswith("http://"))
    return None


class TelemetryConfig:
    """Tracing for one client process.

    start() installs the global tracer provider and adds trace ids to log
    records; shutdown() flushes pending spans. Both are no-ops when
    telemetry_enabled is False. Usable as a context manager.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings
        self.tracer_provider: TracerProvider | None = None

    @property
    def enabled(self) -> bool:
        return self._settings.telemetry_enabled

    def start(self) -> TracerProvider | None:
        if not self.enabled:
            logger.debug("Telemetry disabled")
            return None
        if self.tracer_provider is not None:
            return self.tracer_provider

        settings = self._settings
        provider = TracerProvider(
            resource=Resource(
                attributes={
                    SERVICE_NAME: settings.app_name,
                    SERVICE_VERSION: settings.app_version,
                    "deployment.environment": settings.telemetry_environment,
                }
            ),
            sampler=TraceIdRatioBased(settings.telemetry_sample_rate),
        )
        exporter = _span_exporter(settings)
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))
        trace.set_tracer_provider(provider)
        # Keep the format from setup_logging; only inject otelTraceID/otelSpanID.
        LoggingInstrumentor().instrument(tracer_provider=provider, set_logging_format=False)
        self.tracer_provider = provider
        logger.info(
            "Tracing started: service=%s exporter=%s sample_rate=%s",
            settings.app_name,
            settings.telemetry_exporter,
            settings.telemetry_sample_rate,
        )
        return provider

    def shutdown(self) -> None:
        provider = self.tracer_provider
        if provider is None:
            return
        self.tracer_provider = None
        LoggingInstrumentor().uninstrument()
        provider.shutdown()
        logger.info("Tracing shut down")

    def __enter__(self) -> "TelemetryConfig":
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()
