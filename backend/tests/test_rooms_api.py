"""API tests for POST /room and GET /room."""

from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from chatroom.application.queries.rooms import FindRoomListHandler


def test_create_room(client):
    res = client.post(
        "/room",
        json={"title": "room title", "users": ["user1", "user2", "user3"]},
        headers={"Content-Type": "application/json"},
    )

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "success"
    assert isinstance(body["data"]["id"], int)
    assert body["data"]["title"] == "room title"
    assert body["data"]["users"] == ["user1", "user2", "user3"]
    assert body["data"]["chat"] == []


def test_create_room_measures_title_after_stripping(client):
    padded = "  " + "t" * 100 + "  "

    res = client.post("/room", json={"title": padded, "users": ["user1"]})

    assert res.status_code == 200
    assert res.json()["data"]["title"] == "t" * 100

    too_long = client.post("/room", json={"title": "t" * 101, "users": ["user1"]})
    assert too_long.status_code == 400
    assert too_long.json()["status"] == "fail"


def test_create_room_assigns_distinct_ids(client):
    first = client.post("/room", json={"title": "a", "users": ["x"]}).json()["data"]
    second = client.post("/room", json={"title": "b", "users": ["x"]}).json()["data"]

    assert first["id"] != second["id"]


def test_create_room_collapses_repeated_users(client):
    res = client.post("/room", json={"title": "room", "users": ["b", "a", "b", " a "]})

    assert res.status_code == 200
    assert res.json()["data"]["users"] == ["b", "a"]


@pytest.mark.parametrize(
    "payload",
    [
        {"title": "", "users": ["user1"]},
        {"title": "   ", "users": ["user1"]},
        {"title": "room title", "users": []},
        {"title": "room title", "users": ["user1", " "]},
        {"users": ["user1"]},
        {"title": "room title"},
        {"title": "room title", "users": "user1"},
    ],
)
def test_create_room_rejects_invalid_body(client, payload):
    res = client.post("/room", json=payload)

    assert res.status_code == 400
    body = res.json()
    assert body["status"] == "fail"
    assert body["message"]


def test_get_room_list(client, seed, auth_headers):
    seed(
        rooms=[(100, "room title", ["nickname", "john"])],
        chats=[(1, 100, "john", "hello", datetime(2000, 12, 12, 12, 12, 12))],
    )

    res = client.get("/room", headers=auth_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "success"
    assert body["data"] == [
        {
            "id": 100,
            "title": "room title",
            "users": ["nickname", "john"],
            "chat": [
                {
                    "id": 1,
                    "sender": "john",
                    "message": "hello",
                    "roomId": 100,
                    "createdAt": "2000-12-12T12:12:12",
                }
            ],
        }
    ]


def test_get_room_list_only_returns_rooms_of_the_caller(client, seed, headers_for):
    seed(
        rooms=[
            (1, "mine", ["alice", "bob"]),
            (2, "not mine", ["bob"]),
            (3, "also mine", ["carol", "alice"]),
        ]
    )

    res = client.get("/room", headers=headers_for("alice"))

    assert res.status_code == 200
    assert [room["id"] for room in res.json()["data"]] == [1, 3]


def test_get_room_list_for_user_without_rooms_is_empty(client, seed, headers_for):
    seed(rooms=[(1, "room", ["bob"])])

    res = client.get("/room", headers=headers_for("nobody"))

    assert res.status_code == 200
    assert res.json() == {"status": "success", "data": []}


def test_created_room_shows_up_in_room_list(client, headers_for):
    created = client.post(
        "/room", json={"title": "room title", "users": ["user1", "user2"]}
    ).json()["data"]

    res = client.get("/room", headers=headers_for("user2"))

    assert res.json()["data"] == [created]


def test_get_room_list_requires_authentication(client):
    res = client.get("/room")

    assert res.status_code == 401
    body = res.json()
    assert body["status"] == "fail"
    assert res.headers["WWW-Authenticate"] == "Bearer"


def test_unexpected_failure_uses_error_envelope(app, auth_headers, monkeypatch):
    async def broken_execute(self, query):
        raise RuntimeError("secret db detail")

    monkeypatch.setattr(FindRoomListHandler, "execute", broken_execute)

    with TestClient(app, raise_server_exceptions=False) as client:
        res = client.get(
            "/room", headers={**auth_headers, "X-Correlation-ID": "corr-500"}
        )

    assert res.status_code == 500
    assert res.json() == {"status": "error", "message": "Internal server error"}
    assert "secret db detail" not in res.text
    assert res.headers["X-Correlation-ID"] == "corr-500"
