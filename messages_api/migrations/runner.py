"""Apply versioned SQL migrations or sync tables from ORM metadata.

The API process never touches the schema; this module is run on its own,
before deploying, with ``python -m messages_api.migrations``.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence

from sqlalchemy import inspect, text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from messages_api.config import ConnectionDescriptor, get_settings, resolve_connection
from messages_api.database import create_engine_from_descriptor
from messages_api.models import Base
from messages_api.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "sql"

VERSION_TABLE = "schema_migrations"

_CREATE_VERSION_TABLE = f"""
CREATE TABLE IF NOT EXISTS {VERSION_TABLE} (
    version VARCHAR(255) PRIMARY KEY,
    applied_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
)
"""


@dataclass(frozen=True, slots=True)
class Migration:
    version: str
    path: Path

    def statements(self) -> list[str]:
        return split_statements(self.path.read_text(encoding="utf-8"))


def split_statements(sql: str) -> list[str]:
    """Split a script into single statements.

    Drivers execute one statement per call. Full-line ``--`` comments are
    dropped; semicolons inside string literals are not supported.
    """

    lines = [
        line for line in sql.splitlines() if not line.strip().startswith("--")
    ]
    chunks = "\n".join(lines).split(";")
    return [chunk.strip() for chunk in chunks if chunk.strip()]


def discover_migrations(directory: Path = MIGRATIONS_DIR) -> list[Migration]:
    """Return migrations found in ``directory`` ordered by file name."""

    return [
        Migration(version=path.stem, path=path)
        for path in sorted(directory.glob("*.sql"))
    ]


def _has_version_table(sync_conn) -> bool:
    return inspect(sync_conn).has_table(VERSION_TABLE)


async def _applied_versions(conn: AsyncConnection, *, create: bool) -> set[str]:
    if create:
        await conn.execute(text(_CREATE_VERSION_TABLE))
    elif not await conn.run_sync(_has_version_table):
        return set()
    result = await conn.execute(text(f"SELECT version FROM {VERSION_TABLE}"))
    return {row[0] for row in result}


async def pending_migrations(
    engine: AsyncEngine,
    migrations: Sequence[Migration],
    *,
    create_version_table: bool = True,
) -> list[Migration]:
    async with engine.begin() as conn:
        applied = await _applied_versions(conn, create=create_version_table)
    return [migration for migration in migrations if migration.version not in applied]


async def apply_migrations(
    engine: AsyncEngine,
    migrations: Sequence[Migration],
    *,
    dry_run: bool = False,
) -> list[str]:
    """Apply every pending migration, one transaction per file.

    Returns the versions applied (or that would be applied on a dry run).
    """

    pending = await pending_migrations(
        engine,
        migrations,
        create_version_table=not dry_run,
    )
    if dry_run:
        for migration in pending:
            logger.info("Pending migration %s", migration.version)
        return [migration.version for migration in pending]

    applied: list[str] = []
    for migration in pending:
        async with engine.begin() as conn:
            for statement in migration.statements():
                await conn.execute(text(statement))
            await conn.execute(
                text(f"INSERT INTO {VERSION_TABLE} (version) VALUES (:version)"),
                {"version": migration.version},
            )
        logger.info("Applied migration %s", migration.version)
        applied.append(migration.version)

    if not applied:
        logger.info("Database schema is up to date.")
    return applied


async def sync_schema(engine: AsyncEngine, descriptor: ConnectionDescriptor) -> None:
    """Create missing tables straight from the ORM models.

    Only allowed where the resolved connection permits synchronization, which
    is never the case in production.
    """

    if not descriptor.synchronize:
        raise ConfigurationError(
            "Schema synchronization is disabled in production; apply SQL migrations instead."
        )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Synchronized tables from ORM metadata.")


async def run(
    descriptor: ConnectionDescriptor,
    *,
    sync: bool = False,
    dry_run: bool = False,
    directory: Path = MIGRATIONS_DIR,
) -> list[str]:
    engine = create_engine_from_descriptor(descriptor)
    try:
        if sync:
            await sync_schema(engine, descriptor)
            return []
        return await apply_migrations(
            engine,
            discover_migrations(directory),
            dry_run=dry_run,
        )
    finally:
        await engine.dispose()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="messages-api-migrate",
        description="Apply database schema migrations for the messages API.",
    )
    parser.add_argument(
        "--sync",
        action="store_true",
        help="create missing tables from ORM models (not allowed in production)",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="list pending migrations without applying them",
    )
    parser.add_argument(
        "--directory",
        type=Path,
        default=MIGRATIONS_DIR,
        help="directory holding versioned .sql files",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )

    try:
        descriptor = resolve_connection(get_settings())
        versions = asyncio.run(
            run(
                descriptor,
                sync=args.sync,
                dry_run=args.dry_run,
                directory=args.directory,
            )
        )
    except ConfigurationError as exc:
        logger.error("%s", exc)
        return 2

    if args.dry_run:
        print("\n".join(versions) if versions else "No pending migrations.", file=sys.stdout)
    return 0
