"""Room queries."""

from chatroom.application.queries.rooms.find_room_list import (
    FindRoomListQuery,
    FindRoomListHandler,
)

__all__ = [
    "FindRoomListQuery",
    "FindRoomListHandler",
]
