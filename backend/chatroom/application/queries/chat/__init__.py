"""Chat queries."""

from chatroom.application.queries.chat.find_chat_list import (
    FindChatListQuery,
    FindChatListHandler,
)

__all__ = [
    "FindChatListQuery",
    "FindChatListHandler",
]
