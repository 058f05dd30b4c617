"""
Chat Repository Port - Interface for chat persistence.
Implementation: chatroom/infrastructure/persistence/sqlalchemy_chat_repository.py
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from chatroom.domain.entities.chat import Chat
from chatroom.domain.value_objects.room_id import RoomId


class ChatRepository(ABC):
    @abstractmethod
    async def find_by_room(
        self,
        room_id: RoomId,
        created_from: Optional[datetime] = None,
        created_to: Optional[datetime] = None,
    ) -> list[Chat]:
        """Chats of a room with created_from <= created_at <= created_to, oldest first."""
        ...

    @abstractmethod
    async def add(self, chat: Chat) -> Chat:
        """Persist a new chat and return it with its assigned id."""
        ...
