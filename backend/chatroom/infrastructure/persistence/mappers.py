"""Record <-> entity mapping shared by the SQLAlchemy repositories."""

from typing import Iterable

from chatroom.domain.entities.chat import Chat
from chatroom.domain.entities.room import Room
from chatroom.domain.value_objects.chat_id import ChatId
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.domain.value_objects.room_id import RoomId
from chatroom.infrastructure.persistence.models import ChatRecord, RoomRecord


def chat_to_entity(record: ChatRecord) -> Chat:
    return Chat(
        id=ChatId(record.id),
        room_id=RoomId(record.room_id),
        sender_nickname=Nickname(record.sender_nickname),
        message=record.message,
        created_at=record.created_at,
    )


def room_to_entity(record: RoomRecord, chats: Iterable[ChatRecord] = ()) -> Room:
    return Room(
        id=RoomId(record.id),
        title=record.title,
        users=[Nickname(member.nickname) for member in record.members],
        created_at=record.created_at,
        chats=[chat_to_entity(chat) for chat in chats],
    )
