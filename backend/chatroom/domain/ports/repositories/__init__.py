"""
REPOSITORY PORTS - Data persistence interfaces

Each repository port:
- Is an abstract base class (ABC)
- Defines methods the domain needs
- Does NOT specify implementation

Infrastructure layer provides implementations.
"""

from chatroom.domain.ports.repositories.room_repository import RoomRepository
from chatroom.domain.ports.repositories.chat_repository import ChatRepository

__all__ = [
    "RoomRepository",
    "ChatRepository",
]
