"""Telemetry package - OpenTelemetry metrics and tracing hooks."""

from .metrics import (
    record_validation_metrics,
    validation_latency_ms,
    validation_rule_count,
    validation_rule_failure_total,
    validation_total,
)
from .runtime import get_tracer, meter

__all__ = [
    "get_tracer",
    "meter",
    "record_validation_metrics",
    "validation_latency_ms",
    "validation_rule_count",
    "validation_rule_failure_total",
    "validation_total",
]
