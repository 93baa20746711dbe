"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    MESSAGES_CREATED,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    increment_messages_created,
    observe_request,
)

__all__ = [
    "ERROR_COUNTER",
    "MESSAGES_CREATED",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "increment_messages_created",
    "observe_request",
]
