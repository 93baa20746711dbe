"""Schemas for service status endpoints."""

from datetime import datetime

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    uptime: float


class GreetingResponse(BaseModel):
    message: str
