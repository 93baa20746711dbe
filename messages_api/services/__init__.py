"""Service layer."""

from .messages import MessagesService
from .validation import ValidationResult, validate_create_message

__all__ = ["MessagesService", "ValidationResult", "validate_create_message"]
