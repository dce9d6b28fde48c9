"""Telemetry tests: TelemetryConfig from settings, traced spans, and logging setup."""

import logging
import sys

import pytest
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import SimpleSpanProcessor
from opentelemetry.sdk.trace.export.in_memory_span_exporter import InMemorySpanExporter
from opentelemetry.trace import StatusCode

from pof_client.core.config import Settings
from pof_client.shared.telemetry import (
    TelemetryConfig,
    add_span_attributes,
    setup_logging,
    traced,
)
from pof_client.shared.telemetry import tracing


@pytest.fixture
def spans(monkeypatch: pytest.MonkeyPatch) -> InMemorySpanExporter:
    """Route traced spans to an in-memory exporter."""
    exporter = InMemorySpanExporter()
    provider = TracerProvider()
    provider.add_span_processor(SimpleSpanProcessor(exporter))
    monkeypatch.setattr(tracing, "_tracer", provider.get_tracer("test"))
    return exporter


def test_disabled_telemetry_is_a_no_op() -> None:
    telemetry = TelemetryConfig(Settings(telemetry_enabled=False))
    assert telemetry.enabled is False
    assert telemetry.start() is None
    telemetry.shutdown()
    assert telemetry.tracer_provider is None


def test_enabled_without_exporter_starts_and_shuts_down() -> None:
    settings = Settings(telemetry_enabled=True, telemetry_exporter="none")
    with TelemetryConfig(settings) as telemetry:
        provider = telemetry.tracer_provider
        assert provider is not None
        assert telemetry.start() is provider
    assert telemetry.tracer_provider is None


async def test_traced_async_records_ok_span_with_attributes(spans: InMemorySpanExporter) -> None:
    @traced("pof_client.backend.check_job_status")
    async def check(job_id: str) -> str:
        add_span_attributes(job_id=job_id)
        return job_id

    assert await check("job-1") == "job-1"

    (span,) = spans.get_finished_spans()
    assert span.name == "pof_client.backend.check_job_status"
    assert span.status.status_code is StatusCode.OK
    assert span.attributes["job_id"] == "job-1"


async def test_traced_async_records_error_and_reraises(spans: InMemorySpanExporter) -> None:
    @traced()
    async def boom() -> None:
        raise RuntimeError("connection refused")

    with pytest.raises(RuntimeError, match="connection refused"):
        await boom()

    (span,) = spans.get_finished_spans()
    assert span.name.endswith("boom")
    assert span.status.status_code is StatusCode.ERROR
    assert span.events[0].name == "exception"


def test_traced_sync_function(spans: InMemorySpanExporter) -> None:
    @traced()
    def add(a: int, b: int) -> int:
        return a + b

    assert add(1, 2) == 3
    assert add.__name__ == "add"
    assert len(spans.get_finished_spans()) == 1


def test_add_span_attributes_outside_span_is_ignored() -> None:
    add_span_attributes(job_id="job-1")


@pytest.mark.parametrize(("debug", "level", "httpx_level"), [
    (True, logging.DEBUG, logging.DEBUG),
    (False, logging.INFO, logging.WARNING),
])
def test_setup_logging_writes_to_stderr(
    monkeypatch: pytest.MonkeyPatch, debug: bool, level: int, httpx_level: int
) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    monkeypatch.setattr(logging.getLogger("httpx"), "level", logging.NOTSET)
    monkeypatch.setattr(logging.getLogger("httpcore"), "level", logging.NOTSET)

    setup_logging(debug)

    assert calls[0]["level"] == level
    (handler,) = calls[0]["handlers"]
    assert handler.stream is sys.stderr
    assert logging.getLogger("httpx").level == httpx_level


def test_setup_logging_defaults_to_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "true")
    calls: list[dict] = []
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
    setup_logging()
    assert calls[0]["level"] == logging.DEBUG
