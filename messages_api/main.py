"""Application entry point and FastAPI app factory."""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from .config import Settings, get_settings, resolve_connection
from .controllers import health, messages
from .database import dispose_engine, init_engine, verify_connection
from .middleware import StructuredLoggingMiddleware
from .services.validation import violation_from_error
from .utils import MessageValidationError

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Stream logs to stdout and a rotating file."""

    logging.getLogger().handlers.clear()

    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(formatter)

    log_path = Path(settings.log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = RotatingFileHandler(
        log_path,
        maxBytes=1_000_000,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(file_handler)
    root_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    middleware_logger = logging.getLogger("messages_api.middleware.structured")
    middleware_logger.handlers.clear()
    middleware_stdout = logging.StreamHandler(sys.stdout)
    middleware_stdout.setFormatter(logging.Formatter("%(message)s"))
    middleware_logger.addHandler(middleware_stdout)
    middleware_logger.setLevel(logging.INFO)
    middleware_logger.propagate = False

    for name in ("asyncio", "urllib3"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _validation_response(errors: list[dict]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": "Validation failed", "errors": errors},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    The database connection is resolved here, before any server exists, so a
    production process without ``DATABASE_URL`` never gets to bind a port.
    """

    settings = settings or get_settings()
    configure_logging(settings)
    descriptor = resolve_connection(settings)

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        init_engine(descriptor)
        try:
            await verify_connection()
        except Exception:
            await dispose_engine()
            raise
        try:
            yield
        finally:
            await dispose_engine()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        description="Messages REST API",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.connection = descriptor

    app.add_middleware(StructuredLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.include_router(health.router, prefix=settings.api_prefix)
    app.include_router(messages.router, prefix=settings.api_prefix)

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Expose application metrics for Prometheus scraping."""

        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.exception_handler(MessageValidationError)
    async def message_validation_handler(request: Request, exc: MessageValidationError):
        return _validation_response([v.as_dict() for v in exc.violations])

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = []
        for error in exc.errors():
            # Drop the leading "body" segment FastAPI adds to body locations.
            loc = tuple(error.get("loc") or ())
            if loc[:1] == ("body",) and len(loc) > 1:
                loc = loc[1:]
            errors.append(violation_from_error({**error, "loc": loc}).as_dict())
        return _validation_response(errors)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": "Internal server error"},
        )

    return app
