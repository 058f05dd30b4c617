"""
ENTITIES - Business objects with identity

Each entity:
- Has a unique identifier (assigned by storage)
- Has behavior (methods)
- Pure Python dataclasses (no ORM, no Pydantic)
"""

from chatroom.domain.entities.chat import Chat
from chatroom.domain.entities.room import Room

__all__ = [
    "Chat",
    "Room",
]
