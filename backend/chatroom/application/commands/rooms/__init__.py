"""Room commands."""

from .create_room import CreateRoomCommand, CreateRoomHandler

__all__ = [
    "CreateRoomCommand",
    "CreateRoomHandler",
]
