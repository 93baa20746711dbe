"""Startup resolution of the database connection target."""

from __future__ import annotations

import logging
import ssl
from dataclasses import dataclass
from typing import Any, Literal
from urllib.parse import parse_qsl, quote_plus, urlencode, urlsplit, urlunsplit

from messages_api.config.settings import Settings
from messages_api.utils.errors import ConfigurationError

logger = logging.getLogger(__name__)

ASYNC_DRIVER_SCHEME = "postgresql+asyncpg"
SSL_REQUIRED_MARKER = "sslmode=require"

_POSTGRES_SCHEMES = {"postgres", "postgresql", "postgresql+asyncpg"}
# libpq options asyncpg refuses as connect() keyword arguments.
_LIBPQ_ONLY_OPTIONS = {"sslmode", "channel_binding"}


@dataclass(frozen=True, slots=True)
class ConnectionDescriptor:
    """Fully resolved connection settings consumed by the database layer."""

    url: str
    source: Literal["url", "discrete"]
    ssl_relaxed: bool
    synchronize: bool
    log_queries: bool
    raw_url: str | None = None
    ssl_mode: str | None = None

    def connect_args(self) -> dict[str, Any]:
        """Return keyword arguments handed to the driver's connect call.

        asyncpg defaults to ``sslmode=prefer``, so TLS is switched off
        explicitly unless the connection string asks for it.
        """

        if not self.url.startswith(f"{ASYNC_DRIVER_SCHEME}://"):
            return {}
        if self.ssl_relaxed:
            return {"ssl": _relaxed_ssl_context()}
        if self.ssl_mode:
            return {"ssl": self.ssl_mode}
        return {"ssl": False}

    @property
    def redacted_url(self) -> str:
        parts = urlsplit(self.url)
        userinfo, _, hostport = parts.netloc.rpartition("@")
        if ":" not in userinfo:
            return self.url
        username = userinfo.split(":", 1)[0]
        netloc = f"{username}:***@{hostport}"
        return urlunsplit((parts.scheme, netloc, parts.path, parts.query, parts.fragment))


def _relaxed_ssl_context() -> ssl.SSLContext:
    """TLS without certificate verification, as managed Postgres hosts expect."""

    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


def to_driver_url(url: str) -> str:
    """Point a Postgres URL at the async driver and drop libpq-only options.

    Non-Postgres URLs (e.g. ``sqlite+aiosqlite``) are returned untouched.
    """

    parts = urlsplit(url)
    if parts.scheme not in _POSTGRES_SCHEMES:
        return url

    query = parts.query
    if query:
        params = [
            (key, value)
            for key, value in parse_qsl(query, keep_blank_values=True)
            if key not in _LIBPQ_ONLY_OPTIONS
        ]
        query = urlencode(params)

    return urlunsplit((ASYNC_DRIVER_SCHEME, parts.netloc, parts.path, query, parts.fragment))


def _requested_ssl_mode(url: str) -> str | None:
    for key, value in parse_qsl(urlsplit(url).query, keep_blank_values=True):
        if key == "sslmode" and value:
            return value
    return None


def _discrete_url(settings: Settings) -> str:
    database = settings.database
    credentials = ""
    if database.user:
        credentials = quote_plus(database.user)
        if database.password is not None:
            credentials += ":" + quote_plus(database.password.get_secret_value())
        credentials += "@"
    db_name = database.db_name or ""
    return f"{ASYNC_DRIVER_SCHEME}://{credentials}{database.host}:{database.port}/{db_name}"


def resolve_connection(settings: Settings) -> ConnectionDescriptor:
    """Decide how to reach the database and which safety mode to run in.

    A connection string always wins. Without one, discrete host/port/credential
    values are used, except in production where that is a fatal
    misconfiguration.
    """

    production = settings.is_production
    raw_url = settings.database.url

    if raw_url:
        descriptor = ConnectionDescriptor(
            url=to_driver_url(raw_url),
            source="url",
            ssl_relaxed=SSL_REQUIRED_MARKER in raw_url,
            synchronize=not production,
            log_queries=True,
            raw_url=raw_url,
            ssl_mode=_requested_ssl_mode(raw_url),
        )
    elif not production:
        descriptor = ConnectionDescriptor(
            url=_discrete_url(settings),
            source="discrete",
            ssl_relaxed=False,
            synchronize=True,
            log_queries=True,
        )
    else:
        raise ConfigurationError(
            "DATABASE_URL must be set when ENVIRONMENT is 'production'"
        )

    logger.info(
        "Resolved database connection from %s: %s (ssl=%s, synchronize=%s)",
        descriptor.source,
        descriptor.redacted_url,
        "relaxed" if descriptor.ssl_relaxed else (descriptor.ssl_mode or "disabled"),
        descriptor.synchronize,
    )
    return descriptor
