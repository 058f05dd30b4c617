"""Request bodies. Field names arrive in camelCase (roomId)."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic.alias_generators import to_camel

from chatroom.domain.value_objects.nickname import Nickname


def _check_nickname(value: str) -> str:
    # Raises DomainValidationError (a ValueError), reported as a validation error
    return Nickname(value).value


class LoginRequest(BaseModel):
    """Identify the caller by nickname."""

    nickname: str

    @field_validator("nickname")
    @classmethod
    def nickname_not_blank(cls, value: str) -> str:
        return _check_nickname(value)


class CreateRoomRequest(BaseModel):
    """
    Request body for creating a room.

    `users` must hold at least one nickname.
    """

    # Length is checked after surrounding whitespace is stripped
    title: Annotated[str, StringConstraints(strip_whitespace=True, max_length=100)]
    users: list[str] = Field(min_length=1)

    @field_validator("title")
    @classmethod
    def title_not_blank(cls, value: str) -> str:
        if not value:
            raise ValueError("Room title cannot be blank")
        return value

    @field_validator("users")
    @classmethod
    def users_are_nicknames(cls, value: list[str]) -> list[str]:
        return [_check_nickname(user) for user in value]


class SendChatRequest(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    room_id: int = Field(gt=0)
    message: str = Field(min_length=1, max_length=2000)
