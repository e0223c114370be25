"""
OpenTelemetry integration for argument validation failures.

Guards call ``report_violation`` right before raising. The success path never
touches this module.
"""

import logging
import threading
from typing import Any, Dict, Optional

from opentelemetry import metrics, trace

from ..core.exceptions import ArgumentError

logger = logging.getLogger(__name__)

VIOLATION_EVENT_NAME = "argument.validation_failed"


class ArgumentTracer:
    """
    Records argument violations as metrics and span events.

    Uses whatever tracer and meter providers the host application registered;
    with none registered the OpenTelemetry API falls back to no-ops.
    """

    def __init__(self, service_name: str = "arg_validators"):
        self.service_name = service_name
        self.meter = metrics.get_meter(service_name)
        self.violation_counter = self.meter.create_counter(
            name="argument_violations_total",
            description="Total number of rejected arguments",
            unit="1"
        )

    def record_violation(self, error: ArgumentError, validator: str) -> None:
        """Count a violation and attach it to the current span."""
        attributes = _violation_attributes(error, validator)

        try:
            self.violation_counter.add(1, attributes)
        except Exception as e:
            logger.warning(f"Failed to record argument violation metric: {e}")

        try:
            span = trace.get_current_span()
            if span.is_recording():
                span.add_event(VIOLATION_EVENT_NAME, {
                    **attributes,
                    "message": str(error),
                })
        except Exception as e:
            logger.warning(f"Failed to add argument violation span event: {e}")


def _violation_attributes(error: ArgumentError, validator: str) -> Dict[str, Any]:
    attributes: Dict[str, Any] = {
        "violation_type": type(error).__name__,
        "validator": validator,
    }
    if error.param_name:
        attributes["param_name"] = error.param_name
    return attributes


# Global tracer instance
_global_tracer: Optional[ArgumentTracer] = None
_global_tracer_lock = threading.Lock()


def get_tracer(service_name: str = "arg_validators") -> ArgumentTracer:
    """Get or create the global tracer instance."""
    global _global_tracer

    if _global_tracer is None:
        with _global_tracer_lock:
            if _global_tracer is None:
                _global_tracer = ArgumentTracer(service_name)

    return _global_tracer


def report_violation(error: ArgumentError, validator: str) -> ArgumentError:
    """
    Log and record a guard failure, then hand the error back for raising.

    Usage:
        raise report_violation(NullArgumentError(param_name), "validate_not_null")
    """
    logger.debug(
        "%s rejected parameter %r: %s",
        validator, error.param_name, error.message
    )
    get_tracer().record_violation(error, validator)
    return error


__all__ = [
    "ArgumentTracer",
    "VIOLATION_EVENT_NAME",
    "get_tracer",
    "report_violation",
]
