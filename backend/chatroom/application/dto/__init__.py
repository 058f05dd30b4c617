"""
DTOs - Data Transfer Objects

DTOs for transferring data between layers:
- chat.py → ChatInfo
- room.py → RoomInfo

Note: These are different from domain entities.
DTOs are for API output, entities are for business logic.
Field names go over the wire in camelCase (roomId, createdAt).
"""

from chatroom.application.dto.chat import ChatInfo
from chatroom.application.dto.room import RoomInfo

__all__ = [
    "ChatInfo",
    "RoomInfo",
]
