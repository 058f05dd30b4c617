"""
Rooms API Router - create a room, list the caller's rooms.
"""

from logging import getLogger

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, status

from chatroom.application.commands.rooms import CreateRoomCommand, CreateRoomHandler
from chatroom.application.dto.room import RoomInfo
from chatroom.application.queries.rooms import FindRoomListHandler, FindRoomListQuery
from chatroom.domain.exceptions import DomainValidationError
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.presentation.dependencies.auth import AuthUser, get_current_user
from chatroom.presentation.schemas import ApiSuccess, CreateRoomRequest

logger = getLogger(__name__)

router = APIRouter(prefix="/room", tags=["rooms"])


@router.post(
    "",
    response_model=ApiSuccess[RoomInfo],
    status_code=status.HTTP_200_OK,
)
@inject
async def create_room(
    request: CreateRoomRequest,
    handler: FromDishka[CreateRoomHandler],
):
    """
    Create a room.

    Request: {"title": "room title", "users": ["user1", "user2"]}
    Response: {"status": "success",
               "data": {"id": 1, "title": "room title", "users": [...], "chat": []}}
    """
    try:
        command = CreateRoomCommand(
            title=request.title,
            users=tuple(Nickname(user) for user in request.users),
        )
        room = await handler.execute(command)
        return ApiSuccess[RoomInfo](data=room)
    except DomainValidationError as e:
        logger.warning(f"Create room validation error: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.get(
    "",
    response_model=ApiSuccess[list[RoomInfo]],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_room_list(
    handler: FromDishka[FindRoomListHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """List every room the caller belongs to, each with its full chat history."""
    rooms = await handler.execute(FindRoomListQuery(nickname=current_user.nickname))
    logger.debug(f"Found {len(rooms)} rooms for {current_user.nickname}")
    return ApiSuccess[list[RoomInfo]](data=rooms)
