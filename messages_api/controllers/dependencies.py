"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from messages_api.database import get_session
from messages_api.infrastructure.persistence import SQLAlchemyMessageRepository
from messages_api.services import MessagesService

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_messages_service(session: SessionDep) -> MessagesService:
    """Bind a service to a repository on the request's session."""

    return MessagesService(SQLAlchemyMessageRepository(session))


MessagesServiceDep = Annotated[MessagesService, Depends(get_messages_service)]


__all__ = ["SessionDep", "MessagesServiceDep", "get_messages_service"]
