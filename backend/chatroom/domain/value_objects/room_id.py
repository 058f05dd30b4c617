"""
RoomId Value Object - Storage-assigned integer identity of a room.
"""

from dataclasses import dataclass

from chatroom.domain.exceptions.validation_error import DomainValidationError


@dataclass(frozen=True)
class RoomId:
    value: int

    def __post_init__(self):
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise DomainValidationError(f"Invalid room ID: {self.value!r}")
        if self.value <= 0:
            raise DomainValidationError(f"Room ID must be positive: {self.value}")

    def __str__(self) -> str:
        return str(self.value)
