"""
Room Repository Port - Interface for room persistence.
Implementation: chatroom/infrastructure/persistence/sqlalchemy_room_repository.py
"""

from abc import ABC, abstractmethod
from typing import Optional

from chatroom.domain.entities.room import Room
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.domain.value_objects.room_id import RoomId


class RoomRepository(ABC):
    @abstractmethod
    async def get_by_id(self, room_id: RoomId) -> Optional[Room]: ...

    @abstractmethod
    async def exists(self, room_id: RoomId) -> bool: ...

    @abstractmethod
    async def get_by_member(self, nickname: Nickname) -> list[Room]:
        """Rooms the nickname belongs to, ordered by id, each with its chats oldest first."""
        ...

    @abstractmethod
    async def add(self, room: Room) -> Room:
        """Persist a new room and return it with its assigned id."""
        ...
