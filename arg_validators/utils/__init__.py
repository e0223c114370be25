"""
Observability helpers for the argument validation library.
"""

from .telemetry import ArgumentTracer, get_tracer, report_violation

__all__ = [
    "ArgumentTracer",
    "get_tracer",
    "report_violation",
]
