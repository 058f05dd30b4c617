"""Room DTOs for API response."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from chatroom.application.dto.chat import ChatInfo
from chatroom.domain.entities.room import Room


class RoomInfo(BaseModel):
    """
    A room with its members and chat history.

    Right after creation `chat` is empty; in the room list it holds the
    full history, oldest first.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    title: str
    users: list[str]
    chat: list[ChatInfo] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, room: Room) -> RoomInfo:
        return cls(
            id=room.id.value,
            title=room.title,
            users=[user.value for user in room.users],
            chat=[ChatInfo.from_entity(chat) for chat in room.chats],
        )
