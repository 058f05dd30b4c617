"""
Send Chat Command - Post a message to a room the sender belongs to.
"""

import logging
from dataclasses import dataclass

from chatroom.application.common.interfaces import Command, CommandHandler
from chatroom.application.dto.chat import ChatInfo
from chatroom.domain.entities.chat import Chat
from chatroom.domain.exceptions import AccessDeniedError, EntityNotFoundError
from chatroom.domain.ports.repositories import ChatRepository, RoomRepository
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.domain.value_objects.room_id import RoomId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendChatCommand(Command[ChatInfo]):
    room_id: RoomId
    sender: Nickname
    message: str


class SendChatHandler(CommandHandler[ChatInfo]):
    def __init__(self, room_repo: RoomRepository, chat_repo: ChatRepository):
        self._room_repo = room_repo
        self._chat_repo = chat_repo

    async def execute(self, command: SendChatCommand) -> ChatInfo:
        """
        Raises:
            EntityNotFoundError: If the room doesn't exist
            AccessDeniedError: If the sender is not a member of the room
            DomainValidationError: If the message is blank
        """
        room = await self._room_repo.get_by_id(command.room_id)
        if not room:
            raise EntityNotFoundError(f"Room {command.room_id.value} not found")

        if not room.has_member(command.sender):
            raise AccessDeniedError("You are not a member of this room")

        chat = Chat.create(
            room_id=command.room_id,
            sender=command.sender,
            message=command.message,
        )
        saved = await self._chat_repo.add(chat)
        logger.debug("Chat %s stored in room %s", saved.id, saved.room_id)
        return ChatInfo.from_entity(saved)
