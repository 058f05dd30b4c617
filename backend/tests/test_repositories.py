"""SQLAlchemy repositories against a temporary SQLite database."""

from datetime import datetime

import pytest
import pytest_asyncio

from chatroom.domain.entities.chat import Chat
from chatroom.domain.entities.room import Room
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.domain.value_objects.room_id import RoomId
from chatroom.infrastructure.persistence import (
    SqlAlchemyChatRepository,
    SqlAlchemyRoomRepository,
)
from chatroom.infrastructure.persistence.database import (
    create_engine,
    create_schema,
    create_session_maker,
)


@pytest_asyncio.fixture()
async def session(database_url):
    engine = create_engine(database_url)
    await create_schema(engine)
    async with create_session_maker(engine)() as session:
        yield session
    await engine.dispose()


def _chat(room_id, sender, message, created_at):
    return Chat(
        id=None,
        room_id=room_id,
        sender_nickname=Nickname(sender),
        message=message,
        created_at=created_at,
    )


@pytest.mark.asyncio
async def test_add_room_assigns_id_and_keeps_member_order(session):
    rooms = SqlAlchemyRoomRepository(session)

    saved = await rooms.add(Room.create("room", [Nickname("zed"), Nickname("amy")]))
    loaded = await rooms.get_by_id(saved.id)

    assert saved.id is not None
    assert loaded.title == "room"
    assert loaded.users == [Nickname("zed"), Nickname("amy")]
    assert await rooms.exists(saved.id)
    assert not await rooms.exists(RoomId(saved.id.value + 1))
    assert await rooms.get_by_id(RoomId(saved.id.value + 1)) is None


@pytest.mark.asyncio
async def test_get_by_member_loads_chat_history(session):
    rooms = SqlAlchemyRoomRepository(session)
    chats = SqlAlchemyChatRepository(session)
    first = await rooms.add(Room.create("first", [Nickname("amy")]))
    await rooms.add(Room.create("other", [Nickname("bob")]))
    third = await rooms.add(Room.create("third", [Nickname("bob"), Nickname("amy")]))
    await chats.add(_chat(third.id, "bob", "second", datetime(2000, 1, 2)))
    await chats.add(_chat(third.id, "amy", "first", datetime(2000, 1, 1)))

    result = await rooms.get_by_member(Nickname("amy"))

    assert [room.id for room in result] == [first.id, third.id]
    assert result[0].chats == []
    assert [chat.message for chat in result[1].chats] == ["first", "second"]


@pytest.mark.asyncio
async def test_find_by_room_window_is_inclusive(session):
    rooms = SqlAlchemyRoomRepository(session)
    chats = SqlAlchemyChatRepository(session)
    room = await rooms.add(Room.create("room", [Nickname("amy")]))
    for second in (0, 1, 2, 3):
        await chats.add(_chat(room.id, "amy", f"s{second}", datetime(2000, 1, 1, 0, 0, second)))

    result = await chats.find_by_room(
        room.id,
        created_from=datetime(2000, 1, 1, 0, 0, 1),
        created_to=datetime(2000, 1, 1, 0, 0, 2),
    )

    assert [chat.message for chat in result] == ["s1", "s2"]
    assert all(chat.id is not None for chat in result)
