"""FastAPI routers acting as controllers in the MVC architecture."""

from . import health, messages

__all__ = ["health", "messages"]
