"""
SQLAlchemy Room Repository Implementation.

- Implements RoomRepository port from domain layer
- Members are always loaded (selectin); chats only for the member room list
- Writes commit immediately, one room per transaction
"""

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from chatroom.domain.entities.room import Room
from chatroom.domain.ports.repositories import RoomRepository
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.domain.value_objects.room_id import RoomId
from chatroom.infrastructure.persistence.mappers import room_to_entity
from chatroom.infrastructure.persistence.models import RoomMemberRecord, RoomRecord

logger = logging.getLogger(__name__)


class SqlAlchemyRoomRepository(RoomRepository):
    _session: AsyncSession

    def __init__(self, session: AsyncSession):
        self._session = session

    async def get_by_id(self, room_id: RoomId) -> Optional[Room]:
        """Get room by ID. The chat history is not loaded."""
        record = await self._session.get(RoomRecord, room_id.value)
        return room_to_entity(record) if record else None

    async def exists(self, room_id: RoomId) -> bool:
        result = await self._session.execute(
            select(RoomRecord.id).where(RoomRecord.id == room_id.value)
        )
        return result.scalar_one_or_none() is not None

    async def get_by_member(self, nickname: Nickname) -> list[Room]:
        stmt = (
            select(RoomRecord)
            .join(RoomMemberRecord, RoomMemberRecord.room_id == RoomRecord.id)
            .where(RoomMemberRecord.nickname == nickname.value)
            .options(selectinload(RoomRecord.chats))
            .order_by(RoomRecord.id)
            # Rooms already in the session get their chats reloaded too
            .execution_options(populate_existing=True)
        )
        result = await self._session.execute(stmt)
        return [room_to_entity(record, record.chats) for record in result.scalars().all()]

    async def add(self, room: Room) -> Room:
        record = RoomRecord(
            title=room.title,
            created_at=room.created_at,
            members=[
                RoomMemberRecord(nickname=user.value, position=position)
                for position, user in enumerate(room.users)
            ],
            chats=[],
        )
        self._session.add(record)
        try:
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            logger.exception("Failed to store room '%s'", room.title)
            raise
        return room_to_entity(record)
