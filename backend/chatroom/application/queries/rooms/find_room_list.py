"""Find Room List Query - every room a user belongs to, with chat history."""

from dataclasses import dataclass

from chatroom.application.common.interfaces import Query, QueryHandler
from chatroom.application.dto.room import RoomInfo
from chatroom.domain.ports.repositories import RoomRepository
from chatroom.domain.value_objects.nickname import Nickname


@dataclass(frozen=True)
class FindRoomListQuery(Query[list[RoomInfo]]):
    nickname: Nickname


class FindRoomListHandler(QueryHandler[list[RoomInfo]]):
    def __init__(self, room_repository: RoomRepository):
        self._room_repository = room_repository

    async def execute(self, query: FindRoomListQuery) -> list[RoomInfo]:
        # A user without rooms gets an empty list, not an error
        rooms = await self._room_repository.get_by_member(query.nickname)
        return [RoomInfo.from_entity(room) for room in rooms]
