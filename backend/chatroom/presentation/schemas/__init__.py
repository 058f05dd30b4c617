"""Request and response schemas for the HTTP layer."""

from chatroom.presentation.schemas.envelope import ApiFailure, ApiSuccess
from chatroom.presentation.schemas.requests import (
    CreateRoomRequest,
    LoginRequest,
    SendChatRequest,
)

__all__ = [
    "ApiFailure",
    "ApiSuccess",
    "CreateRoomRequest",
    "LoginRequest",
    "SendChatRequest",
]
