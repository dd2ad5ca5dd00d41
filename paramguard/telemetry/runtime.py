# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""OpenTelemetry meter and tracer accessors for paramguard.

Only the OpenTelemetry API is used. Without an SDK configured by the host
application every instrument is a no-op.
"""

from __future__ import annotations

from opentelemetry import metrics, trace

_PACKAGE = "paramguard"

meter = metrics.get_meter(_PACKAGE)


def get_tracer(name: str = _PACKAGE) -> trace.Tracer:
    """Return a tracer from the globally configured tracer provider."""

    return trace.get_tracer(name)


__all__ = ["get_tracer", "meter"]
