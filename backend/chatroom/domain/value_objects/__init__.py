"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
"""

from chatroom.domain.value_objects.room_id import RoomId
from chatroom.domain.value_objects.chat_id import ChatId
from chatroom.domain.value_objects.nickname import Nickname

__all__ = [
    "RoomId",
    "ChatId",
    "Nickname",
]
