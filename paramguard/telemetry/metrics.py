# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Metric instrument definitions for paramguard."""

from __future__ import annotations

import logging
import time

from .runtime import meter

logger = logging.getLogger(__name__)

validation_total = meter.create_counter(
    name="paramguard.validation.total",
    description="Counts validation passes, partitioned by status (passed/failed).",
    unit="1",
)

validation_rule_failure_total = meter.create_counter(
    name="paramguard.validation.rule_failure.total",
    description="Counts individual rule failure messages across all validation passes.",
    unit="1",
)

validation_latency_ms = meter.create_histogram(
    name="paramguard.validation.latency.ms",
    description="Time spent evaluating the rule list of a single validation pass.",
    unit="ms",
)

validation_rule_count = meter.create_histogram(
    name="paramguard.validation.rule_count",
    description="Number of parsed rules evaluated by a single validation pass.",
    unit="1",
)


def record_validation_metrics(status: str, started_at: float, *, rule_count: int, error_count: int) -> None:
    """Record the outcome of one validation pass.

    Args:
        status: ``"passed"`` or ``"failed"``
        started_at: Timestamp from ``time.perf_counter()`` when the pass started
        rule_count: Number of parsed rules evaluated
        error_count: Number of failure messages produced
    """

    duration_ms = (time.perf_counter() - started_at) * 1000.0
    try:
        validation_latency_ms.record(duration_ms, {"status": status})
        validation_total.add(1, {"status": status})
        validation_rule_count.record(rule_count, {"status": status})
        if error_count:
            validation_rule_failure_total.add(error_count)
    except Exception:
        # Telemetry must never interfere with validation
        logger.debug("Failed to record validation metrics", exc_info=True)


__all__ = [
    "record_validation_metrics",
    "validation_latency_ms",
    "validation_rule_count",
    "validation_rule_failure_total",
    "validation_total",
]
