from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from messages_api.application.interfaces import MessageRepositoryInterface
from messages_api.models.message import Message


class SQLAlchemyMessageRepository(MessageRepositoryInterface):
    """SQLAlchemy implementation for messages"""

    def __init__(self, session: AsyncSession):
        self.session = session

    def create(self, text: str) -> Message:
        return Message(text=text)

    async def save(self, message: Message) -> Message:
        self.session.add(message)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        await self.session.refresh(message)
        return message

    async def find(self) -> List[Message]:
        result = await self.session.execute(select(Message))
        return list(result.scalars().all())
