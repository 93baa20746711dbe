"""Explicit validation of inbound message payloads."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, Mapping, Optional, TypeVar

from pydantic import ValidationError

from messages_api.utils.errors import ConstraintViolation
from messages_api.views.messages import MessageCreate

T = TypeVar("T")

# pydantic error type -> constraint name reported to clients
_CONSTRAINTS = {
    "missing": "isDefined",
    "string_type": "isString",
    "string_too_short": "minLength",
    "extra_forbidden": "whitelist",
}


@dataclass(slots=True)
class ValidationResult(Generic[T]):
    """Either a validated value or the list of violated constraints."""

    value: Optional[T] = None
    violations: list[ConstraintViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def violation_from_error(error: Mapping[str, Any]) -> ConstraintViolation:
    loc = error.get("loc") or ()
    field_name = ".".join(str(part) for part in loc) or "body"
    error_type = error.get("type", "")
    constraint = _CONSTRAINTS.get(error_type, error_type or "invalid")

    if error_type == "json_invalid":
        return ConstraintViolation(
            field="body",
            constraint="isJson",
            message="request body is not valid JSON",
        )

    if error_type == "extra_forbidden":
        message = f"property {field_name} should not exist"
    elif error_type == "string_too_short":
        message = f"{field_name} must not be empty"
    elif error_type == "string_type":
        message = f"{field_name} must be a string"
    elif error_type == "missing":
        message = f"{field_name} is required"
    else:
        message = str(error.get("msg", "invalid value"))

    return ConstraintViolation(field=field_name, constraint=constraint, message=message)


def validate_create_message(raw: Any) -> ValidationResult[MessageCreate]:
    """Validate a create-message payload without raising."""

    if isinstance(raw, MessageCreate):
        return ValidationResult(value=raw)

    if not isinstance(raw, Mapping):
        return ValidationResult(
            violations=[
                ConstraintViolation(
                    field="body",
                    constraint="isObject",
                    message="request body must be a JSON object",
                )
            ]
        )

    try:
        value = MessageCreate.model_validate(dict(raw))
    except ValidationError as exc:
        return ValidationResult(
            violations=[violation_from_error(error) for error in exc.errors()]
        )
    return ValidationResult(value=value)
