"""Pydantic schemas for messages."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictStr


class MessageCreate(BaseModel):
    text: StrictStr = Field(min_length=1)

    model_config = ConfigDict(extra="forbid")


class MessageRead(BaseModel):
    id: UUID
    text: str
    created_at: datetime = Field(serialization_alias="createdAt")

    model_config = ConfigDict(from_attributes=True)
