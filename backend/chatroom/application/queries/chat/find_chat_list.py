"""
FindChatList Query - Chats of one room inside a creation-time window.

Used by the client to load (part of) a room's history.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from chatroom.application.common.interfaces import Query, QueryHandler
from chatroom.application.dto.chat import ChatInfo
from chatroom.domain.exceptions import DomainValidationError, EntityNotFoundError
from chatroom.domain.ports.repositories import ChatRepository, RoomRepository
from chatroom.domain.value_objects.room_id import RoomId


def _as_naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Stored timestamps are naive UTC; aware bounds are converted to match."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


@dataclass(frozen=True)
class FindChatListQuery(Query[list[ChatInfo]]):
    """
    Filter for a room's chats.

    Both bounds are optional and inclusive: a chat matches when
    created_from <= created_at <= created_to.
    """

    room_id: RoomId
    created_from: Optional[datetime] = None
    created_to: Optional[datetime] = None


class FindChatListHandler(QueryHandler[list[ChatInfo]]):
    def __init__(self, room_repo: RoomRepository, chat_repo: ChatRepository):
        self._room_repo = room_repo
        self._chat_repo = chat_repo

    async def execute(self, query: FindChatListQuery) -> list[ChatInfo]:
        """
        Returns:
            Chats of the room within the window, oldest first

        Raises:
            EntityNotFoundError: If the room doesn't exist
            DomainValidationError: If the window starts after it ends
        """
        created_from = _as_naive_utc(query.created_from)
        created_to = _as_naive_utc(query.created_to)
        if (
            created_from is not None
            and created_to is not None
            and created_from > created_to
        ):
            raise DomainValidationError("'from' must not be later than 'to'")

        if not await self._room_repo.exists(query.room_id):
            raise EntityNotFoundError(f"Room {query.room_id.value} not found")

        chats = await self._chat_repo.find_by_room(
            query.room_id, created_from=created_from, created_to=created_to
        )
        return [ChatInfo.from_entity(chat) for chat in chats]
