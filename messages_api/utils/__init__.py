"""Utility helpers for the messages backend."""

from .errors import ConfigurationError, ConstraintViolation, MessageValidationError

__all__ = [
    "ConfigurationError",
    "ConstraintViolation",
    "MessageValidationError",
]
