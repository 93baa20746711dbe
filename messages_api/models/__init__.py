"""SQLAlchemy models."""

from .base import Base
from .message import Message  # noqa: F401

__all__ = ["Base", "Message"]
