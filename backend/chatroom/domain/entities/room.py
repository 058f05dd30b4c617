"""
Room Entity - A named chat channel with an ordered member list.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, Optional

from chatroom.domain.entities.chat import Chat, utc_now
from chatroom.domain.exceptions.validation_error import DomainValidationError
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.domain.value_objects.room_id import RoomId

MAX_TITLE_LENGTH = 100


@dataclass
class Room:
    # Required fields (no defaults) - must come first
    id: Optional[RoomId]
    title: str
    users: list[Nickname]
    created_at: datetime
    # Loaded chat history, oldest first
    chats: list[Chat] = field(default_factory=list)

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise DomainValidationError("Room title cannot be blank")
        if len(self.title) > MAX_TITLE_LENGTH:
            raise DomainValidationError(
                f"Room title cannot exceed {MAX_TITLE_LENGTH} characters"
            )
        if not self.users:
            raise DomainValidationError("A room needs at least one user")

    @classmethod
    def create(cls, title: str, users: Iterable[Nickname]) -> Room:
        """Factory method for a new room. Repeated nicknames keep their first position."""
        members: list[Nickname] = []
        for user in users:
            if user not in members:
                members.append(user)
        return cls(
            id=None,
            title=title.strip() if title else title,
            users=members,
            created_at=utc_now(),
        )

    def has_member(self, nickname: Nickname) -> bool:
        return nickname in self.users
