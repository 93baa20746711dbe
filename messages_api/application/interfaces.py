from abc import ABC, abstractmethod
from typing import List

from messages_api.models.message import Message


class MessageRepositoryInterface(ABC):
    """Persistence contract for messages"""

    @abstractmethod
    def create(self, text: str) -> Message:
        """Build an unsaved message entity."""

    @abstractmethod
    async def save(self, message: Message) -> Message:
        ...

    @abstractmethod
    async def find(self) -> List[Message]:
        ...
