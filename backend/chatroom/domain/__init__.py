"""
DOMAIN LAYER - Rooms, chats and the rules around them

This layer contains:
- Entities: Business objects with identity (Room, Chat)
- Value Objects: Immutable types (RoomId, ChatId, Nickname)
- Ports: Interfaces that infrastructure implements
- Exceptions: Domain-specific errors

RULES:
1. NO framework imports (no FastAPI, SQLAlchemy, Pydantic, etc.)
2. NO I/O operations
3. Only depends on Python stdlib
"""
