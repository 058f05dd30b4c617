"""
Chat API Router.

- Thin layer: only handles HTTP concerns (request/response)
- Receives handlers via Dependency Injection (Dishka)
- Wraps results in the {status, data} envelope

Flow:
  HTTP Request → Router → Query/Command → Handler → Repository → Database
"""

from datetime import datetime
from logging import getLogger
from typing import Optional

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Depends, HTTPException, Query, status

from chatroom.application.commands.chat import SendChatCommand, SendChatHandler
from chatroom.application.dto.chat import ChatInfo
from chatroom.application.queries.chat import FindChatListHandler, FindChatListQuery
from chatroom.domain.exceptions import (
    AccessDeniedError,
    DomainValidationError,
    EntityNotFoundError,
)
from chatroom.domain.value_objects.room_id import RoomId
from chatroom.presentation.dependencies.auth import AuthUser, get_current_user
from chatroom.presentation.schemas import ApiSuccess, SendChatRequest

logger = getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


@router.get(
    "",
    response_model=ApiSuccess[list[ChatInfo]],
    status_code=status.HTTP_200_OK,
)
@inject
async def get_chat_list(
    handler: FromDishka[FindChatListHandler],
    room_id: int = Query(..., alias="roomId", gt=0, description="Room id"),
    created_from: Optional[datetime] = Query(
        None, alias="from", description="Earliest creation time, inclusive"
    ),
    created_to: Optional[datetime] = Query(
        None, alias="to", description="Latest creation time, inclusive"
    ),
):
    """
    List the chats of a room created within [from, to].

    Response:
    {
        "status": "success",
        "data": [
            {"id": 1, "sender": "...", "message": "...", "roomId": 100,
             "createdAt": "1999-10-10T12:10:10"},
            ...
        ]
    }
    """
    try:
        query = FindChatListQuery(
            room_id=RoomId(room_id),
            created_from=created_from,
            created_to=created_to,
        )
        chats = await handler.execute(query)
        logger.debug(f"Found {len(chats)} chats in room {room_id}")
        return ApiSuccess[list[ChatInfo]](data=chats)
    except EntityNotFoundError as e:
        logger.warning(f"Chat request for unknown room: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except DomainValidationError as e:
        logger.warning(f"Chat validation error: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e


@router.post(
    "",
    response_model=ApiSuccess[ChatInfo],
    status_code=status.HTTP_200_OK,
)
@inject
async def send_chat(
    request: SendChatRequest,
    handler: FromDishka[SendChatHandler],
    current_user: AuthUser = Depends(get_current_user),
):
    """Post a message to a room the caller belongs to."""
    try:
        command = SendChatCommand(
            room_id=RoomId(request.room_id),
            sender=current_user.nickname,
            message=request.message,
        )
        chat = await handler.execute(command)
        return ApiSuccess[ChatInfo](data=chat)
    except EntityNotFoundError as e:
        logger.warning(f"Send chat to unknown room: {e}")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e
    except AccessDeniedError as e:
        logger.warning(f"Send chat denied: {e}")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e)) from e
    except DomainValidationError as e:
        logger.warning(f"Chat validation error: {e.message}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message) from e
