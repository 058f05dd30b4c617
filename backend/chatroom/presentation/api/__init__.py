"""
API Routers - FastAPI endpoint definitions.
"""

from chatroom.presentation.api.auth import router as auth_router
from chatroom.presentation.api.chat import router as chat_router
from chatroom.presentation.api.rooms import router as rooms_router

__all__ = [
    "auth_router",
    "chat_router",
    "rooms_router",
]
