"""
Create Room Command.

- Command: @dataclass(frozen=True) holding input data
- Handler: receives repository via __init__ (DI)
- Returns: RoomInfo of the persisted room, with an empty chat list
"""

import logging
from dataclasses import dataclass

from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.application.dto.room import RoomInfo
from chatroom.domain.entities.room import Room
from chatroom.domain.ports.repositories import RoomRepository
from chatroom.domain.value_objects.nickname import Nickname

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateRoomCommand(Command[RoomInfo]):
    title: str
    users: tuple[Nickname, ...]


class CreateRoomHandler(CommandHandler[RoomInfo]):
    _room_repository: RoomRepository

    def __init__(self, room_repository: RoomRepository):
        self._room_repository = room_repository

    async def execute(self, command: CreateRoomCommand) -> RoomInfo:
        # Raises DomainValidationError on a blank title or no users
        room = Room.create(title=command.title, users=command.users)
        saved = await self._room_repository.add(room)
        logger.info(
            "Created room %s '%s' with %d user(s)",
            saved.id, saved.title, len(saved.users),
        )
        return RoomInfo.from_entity(saved)
