"""
Chat Entity - A single message sent by a member within a room.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from chatroom.domain.exceptions.validation_error import DomainValidationError
from chatroom.domain.value_objects.chat_id import ChatId
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.domain.value_objects.room_id import RoomId

MAX_MESSAGE_LENGTH = 2000


def utc_now() -> datetime:
    """Current time as a naive UTC datetime, the form timestamps are stored in."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class Chat:
    id: Optional[ChatId]
    room_id: RoomId
    sender_nickname: Nickname
    message: str
    created_at: datetime

    def __post_init__(self):
        if not self.message or not self.message.strip():
            raise DomainValidationError("Chat message cannot be blank")
        if len(self.message) > MAX_MESSAGE_LENGTH:
            raise DomainValidationError(
                f"Chat message cannot exceed {MAX_MESSAGE_LENGTH} characters"
            )

    @classmethod
    def create(cls, room_id: RoomId, sender: Nickname, message: str) -> Chat:
        """Factory method for a new, not yet persisted chat stamped with the current time."""
        return cls(
            id=None,
            room_id=room_id,
            sender_nickname=sender,
            message=message,
            created_at=utc_now(),
        )
