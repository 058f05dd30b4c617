"""
Nickname Value Object - The identity a user chats under.

Used both as the room membership key and as the sender of a chat.
"""

from dataclasses import dataclass

from chatroom.domain.exceptions.validation_error import DomainValidationError

MAX_NICKNAME_LENGTH = 50


@dataclass(frozen=True)
class Nickname:
    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value.strip():
            raise DomainValidationError("Nickname cannot be blank")
        # frozen dataclass, so bypass __setattr__ to store the stripped form
        object.__setattr__(self, "value", self.value.strip())
        if len(self.value) > MAX_NICKNAME_LENGTH:
            raise DomainValidationError(
                f"Nickname cannot exceed {MAX_NICKNAME_LENGTH} characters"
            )

    def __str__(self) -> str:
        return self.value
