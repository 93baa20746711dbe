"""Pydantic schemas used as views in the MVC architecture."""

from .common import ConstraintViolationView, ErrorResponse
from .health import GreetingResponse, HealthResponse
from .messages import MessageCreate, MessageRead

__all__ = [
    "ConstraintViolationView",
    "ErrorResponse",
    "GreetingResponse",
    "HealthResponse",
    "MessageCreate",
    "MessageRead",
]
