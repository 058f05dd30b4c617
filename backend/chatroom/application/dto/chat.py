"""Chat DTOs for API response."""

from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from chatroom.domain.entities.chat import Chat


class ChatInfo(BaseModel):
    """A chat as returned to clients."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    sender: str
    message: str
    room_id: int
    created_at: datetime

    @classmethod
    def from_entity(cls, chat: Chat) -> ChatInfo:
        return cls(
            id=chat.id.value,
            sender=chat.sender_nickname.value,
            message=chat.message,
            room_id=chat.room_id.value,
            created_at=chat.created_at,
        )
