"""Common response schemas."""

from typing import Optional

from pydantic import BaseModel


class ConstraintViolationView(BaseModel):
    field: str
    constraint: str
    message: str


class ErrorResponse(BaseModel):
    detail: str
    errors: Optional[list[ConstraintViolationView]] = None
