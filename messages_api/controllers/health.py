"""Service status endpoints."""

import time
from datetime import datetime, timezone

from fastapi import APIRouter

from messages_api.views import GreetingResponse, HealthResponse

router = APIRouter(tags=["health"])

_STARTED_AT = time.monotonic()


@router.get("/", response_model=GreetingResponse)
async def root() -> GreetingResponse:
    return GreetingResponse(message="Hello World!")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Health check endpoint."""

    return HealthResponse(
        status="ok",
        timestamp=datetime.now(timezone.utc),
        uptime=round(time.monotonic() - _STARTED_AT, 3),
    )
