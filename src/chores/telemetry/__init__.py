"""Telemetry module for OpenTelemetry instrumentation."""
from chores.telemetry.instrumentation import (
    TelemetryManager,
    create_chore_span_attributes,
    set_span_attributes,
)

__all__ = [
    "TelemetryManager",
    "set_span_attributes",
    "create_chore_span_attributes",
]
