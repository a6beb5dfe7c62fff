# Trace id lookup from the active OpenTelemetry span.

from __future__ import annotations
from opentelemetry import trace


def current_trace_id() -> str:
    """32-hex trace id of the current span, or "" when there is no valid span context."""
    ctx = trace.get_current_span().get_span_context()
    if not ctx.is_valid:
        return ""
    return format(ctx.trace_id, "032x")
