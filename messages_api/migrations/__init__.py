"""Explicit, separately invoked schema migrations."""

from .runner import (
    MIGRATIONS_DIR,
    Migration,
    apply_migrations,
    discover_migrations,
    main,
    pending_migrations,
    split_statements,
    sync_schema,
)

__all__ = [
    "MIGRATIONS_DIR",
    "Migration",
    "apply_migrations",
    "discover_migrations",
    "main",
    "pending_migrations",
    "split_statements",
    "sync_schema",
]
