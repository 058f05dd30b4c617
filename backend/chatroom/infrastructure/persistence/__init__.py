"""
Persistence Layer - Database implementations.

Contains SQLAlchemy repository implementations for domain ports.
"""

from chatroom.infrastructure.persistence.models import (
    Base,
    ChatRecord,
    RoomMemberRecord,
    RoomRecord,
)
from chatroom.infrastructure.persistence.sqlalchemy_room_repository import (
    SqlAlchemyRoomRepository,
)
from chatroom.infrastructure.persistence.sqlalchemy_chat_repository import (
    SqlAlchemyChatRepository,
)

__all__ = [
    "Base",
    "ChatRecord",
    "RoomMemberRecord",
    "RoomRecord",
    "SqlAlchemyRoomRepository",
    "SqlAlchemyChatRepository",
]
