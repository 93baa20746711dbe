"""Configuration package."""

from .connection import ConnectionDescriptor, resolve_connection
from .settings import DatabaseConfig, Settings, get_settings

__all__ = [
    "ConnectionDescriptor",
    "DatabaseConfig",
    "Settings",
    "get_settings",
    "resolve_connection",
]
