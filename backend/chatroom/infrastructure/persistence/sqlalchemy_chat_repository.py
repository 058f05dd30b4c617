"""
SQLAlchemy Chat Repository Implementation.

- Implements ChatRepository port from domain layer
- Time window bounds are inclusive
- Ordered oldest first, ties broken by id
"""

import dataclasses
import logging
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from chatroom.domain.entities.chat import Chat
from chatroom.domain.ports.repositories import ChatRepository
from chatroom.domain.value_objects.chat_id import ChatId
from chatroom.domain.value_objects.room_id import RoomId
from chatroom.infrastructure.persistence.mappers import chat_to_entity
from chatroom.infrastructure.persistence.models import ChatRecord

logger = logging.getLogger(__name__)


class SqlAlchemyChatRepository(ChatRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_room(
        self,
        room_id: RoomId,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> list[Chat]:
        stmt = select(ChatRecord).where(ChatRecord.room_id == room_id.value)
        if created_from is not None:
            stmt = stmt.where(ChatRecord.created_at >= created_from)
        if created_to is not None:
            stmt = stmt.where(ChatRecord.created_at <= created_to)
        stmt = stmt.order_by(ChatRecord.created_at, ChatRecord.id)

        result = await self._session.execute(stmt)
        return [chat_to_entity(record) for record in result.scalars().all()]

    async def add(self, chat: Chat) -> Chat:
        record = ChatRecord(
            room_id=chat.room_id.value,
            sender_nickname=chat.sender_nickname.value,
            message=chat.message,
            created_at=chat.created_at,
        )
        self._session.add(record)
        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            logger.exception("Failed to store chat in room %s", chat.room_id)
            raise
        return dataclasses.replace(chat, id=ChatId(record.id))
