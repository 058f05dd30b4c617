"""Chat commands."""

from .send_chat import SendChatCommand, SendChatHandler

__all__ = [
    "SendChatCommand",
    "SendChatHandler",
]
