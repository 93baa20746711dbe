"""Business rules for the messages resource."""

from __future__ import annotations

import logging
from typing import Any, List

from messages_api.application.interfaces import MessageRepositoryInterface
from messages_api.models.message import Message
from messages_api.services.validation import validate_create_message
from messages_api.telemetry import increment_messages_created
from messages_api.utils.errors import MessageValidationError

logger = logging.getLogger(__name__)


class MessagesService:
    """Create and list messages through a repository."""

    def __init__(self, repository: MessageRepositoryInterface):
        self.repository = repository

    async def create(self, payload: Any) -> Message:
        result = validate_create_message(payload)
        if not result.ok:
            logger.info(
                "Rejected message payload: %s",
                ", ".join(f"{v.field}:{v.constraint}" for v in result.violations),
            )
            raise MessageValidationError(result.violations)

        message = self.repository.create(result.value.text)
        saved = await self.repository.save(message)
        increment_messages_created()
        logger.debug("Stored message %s", saved.id)
        return saved

    async def find_all(self) -> List[Message]:
        return await self.repository.find()
