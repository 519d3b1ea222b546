"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from ranked_search.shared.telemetry.logging import setup_logging
from ranked_search.shared.telemetry.telemetry import (
    TelemetryConfig,
    get_telemetry,
    set_telemetry,
)
from ranked_search.shared.telemetry.tracing import (
    add_span_attributes,
    get_trace_id,
    set_span_error,
    traced,
)

__all__ = [
    "setup_logging",
    "TelemetryConfig",
    "get_telemetry",
    "set_telemetry",
    "traced",
    "add_span_attributes",
    "set_span_error",
    "get_trace_id",
]
