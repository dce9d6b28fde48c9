"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from pof_client.shared.telemetry.logging import get_logger, setup_logging
from pof_client.shared.telemetry.telemetry import TelemetryConfig
from pof_client.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "get_logger",
    "TelemetryConfig",
    "traced",
    "add_span_attributes",
]
