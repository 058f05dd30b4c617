"""Entity and value object rules."""

from datetime import datetime, timezone

import pytest

from chatroom.domain.entities.chat import Chat
from chatroom.domain.entities.room import Room
from chatroom.domain.exceptions import DomainValidationError
from chatroom.domain.value_objects.nickname import Nickname
from chatroom.domain.value_objects.room_id import RoomId


class TestNickname:
    def test_is_stripped(self):
        assert Nickname("  john ").value == "john"

    @pytest.mark.parametrize("value", ["", "   ", None, "x" * 51])
    def test_rejects_invalid(self, value):
        with pytest.raises(DomainValidationError):
            Nickname(value)

    def test_equal_by_value(self):
        assert Nickname("john") == Nickname(" john")


class TestRoomId:
    @pytest.mark.parametrize("value", [0, -1, True, "100"])
    def test_rejects_invalid(self, value):
        with pytest.raises(DomainValidationError):
            RoomId(value)


class TestRoom:
    def test_create_keeps_member_order_and_drops_repeats(self):
        room = Room.create("room", [Nickname("b"), Nickname("a"), Nickname("b")])

        assert room.id is None
        assert room.users == [Nickname("b"), Nickname("a")]
        assert room.chats == []
        assert room.has_member(Nickname("a"))
        assert not room.has_member(Nickname("c"))

    @pytest.mark.parametrize("title", ["", "   ", "x" * 101])
    def test_rejects_bad_title(self, title):
        with pytest.raises(DomainValidationError):
            Room.create(title, [Nickname("a")])

    def test_requires_a_user(self):
        with pytest.raises(DomainValidationError, match="at least one user"):
            Room.create("room", [])


class TestChat:
    def test_create_stamps_creation_time(self):
        before = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)

        chat = Chat.create(RoomId(1), Nickname("john"), "hello")

        assert chat.id is None
        assert chat.created_at.tzinfo is None
        assert chat.created_at >= before

    def test_rejects_blank_message(self):
        with pytest.raises(DomainValidationError):
            Chat.create(RoomId(1), Nickname("john"), "  ")
