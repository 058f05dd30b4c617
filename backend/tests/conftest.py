import asyncio
import os
import sys
from datetime import datetime

import pytest

# Add backend directory to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

from fastapi.testclient import TestClient
from chatroom.fastapi_app import create_fastapi_app
from chatroom.infrastructure.persistence import ChatRecord, RoomMemberRecord, RoomRecord
from chatroom.infrastructure.persistence.database import create_engine, create_schema
from chatroom.presentation.api.auth import limiter
from chatroom.setup.ioc import create_container
from jwt_generation import generate_jwt_token


@pytest.fixture()
def database_url(tmp_path):
    """A fresh SQLite file per test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'chatroom.db'}"


@pytest.fixture()
def app(database_url):
    """Create and configure a new FastAPI app instance for each test."""
    return create_fastapi_app(create_container(database_url))


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app, with startup/shutdown run."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture()
def auth_headers():
    """Authentication headers for the user 'nickname'."""
    return {"Authorization": f"Bearer {generate_jwt_token('nickname')}"}


@pytest.fixture()
def headers_for():
    """Build authentication headers for any nickname."""

    def _headers(nickname: str) -> dict:
        return {"Authorization": f"Bearer {generate_jwt_token(nickname)}"}

    return _headers


@pytest.fixture()
def seed(database_url):
    """
    Write rooms and chats straight into the test database.

    Usage:
        seed(rooms=[(100, "room title", ["john"])],
             chats=[(1, 100, "john", "hello", datetime(...))])
    """

    async def _seed(rooms, chats):
        engine = create_engine(database_url)
        try:
            await create_schema(engine)
            async with engine.begin() as conn:
                for room_id, title, users in rooms:
                    await conn.execute(
                        RoomRecord.__table__.insert().values(
                            id=room_id, title=title, created_at=datetime(1999, 1, 1)
                        )
                    )
                    for position, user in enumerate(users):
                        await conn.execute(
                            RoomMemberRecord.__table__.insert().values(
                                room_id=room_id, nickname=user, position=position
                            )
                        )
                for chat_id, room_id, sender, message, created_at in chats:
                    await conn.execute(
                        ChatRecord.__table__.insert().values(
                            id=chat_id,
                            room_id=room_id,
                            sender_nickname=sender,
                            message=message,
                            created_at=created_at,
                        )
                    )
        finally:
            await engine.dispose()

    def _run(rooms=(), chats=()):
        asyncio.run(_seed(rooms, chats))

    return _run
