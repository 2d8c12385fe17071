"""Shared telemetry: logging setup, OpenTelemetry config, and tracing helpers."""

from chatsearch.shared.telemetry.logging import setup_logging
from chatsearch.shared.telemetry.telemetry import (
    Telemetry,
    get_telemetry,
    instrument_fastapi,
    set_telemetry,
)
from chatsearch.shared.telemetry.tracing import add_span_attributes, traced

__all__ = [
    "setup_logging",
    "Telemetry",
    "get_telemetry",
    "instrument_fastapi",
    "set_telemetry",
    "traced",
    "add_span_attributes",
]
