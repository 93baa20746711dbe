"""Application error types."""

from __future__ import annotations

from dataclasses import dataclass


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the given configuration."""


@dataclass(frozen=True, slots=True)
class ConstraintViolation:
    """A single failed validation rule for one input field."""

    field: str
    constraint: str
    message: str

    def as_dict(self) -> dict[str, str]:
        return {
            "field": self.field,
            "constraint": self.constraint,
            "message": self.message,
        }


class MessageValidationError(ValueError):
    """Raised when a message payload fails validation."""

    def __init__(self, violations: list[ConstraintViolation]):
        self.violations = list(violations)
        summary = "; ".join(v.message for v in self.violations) or "invalid input"
        super().__init__(summary)
