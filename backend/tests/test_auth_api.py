"""Tests for POST /login and bearer token handling."""

from datetime import timedelta

from jwt_generation import generate_jwt_token


def test_login_returns_usable_token(client):
    res = client.post("/login", json={"nickname": "  john "})

    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "success"
    assert body["data"]["nickname"] == "john"
    assert body["data"]["tokenType"] == "bearer"

    client.post("/room", json={"title": "room", "users": ["john"]})
    rooms = client.get(
        "/room", headers={"Authorization": f"Bearer {body['data']['accessToken']}"}
    )
    assert rooms.status_code == 200
    assert [room["title"] for room in rooms.json()["data"]] == ["room"]


def test_login_rejects_blank_nickname(client):
    res = client.post("/login", json={"nickname": "   "})

    assert res.status_code == 400
    assert res.json()["status"] == "fail"


def test_login_is_rate_limited(client):
    status_codes = [
        client.post("/login", json={"nickname": "john"}).status_code for _ in range(40)
    ]

    assert 429 in status_codes, "Expected at least one 429 Too Many Requests response"
    assert status_codes[0] == 200


def test_expired_token_is_rejected(client):
    token = generate_jwt_token("john", expires_in=timedelta(hours=-1))

    res = client.get("/room", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 401
    assert res.json() == {"status": "fail", "message": "Token has expired"}


def test_token_signed_with_other_secret_is_rejected(client):
    token = generate_jwt_token("john", secret="not-the-secret-used-by-the-server-at-all")

    res = client.get("/room", headers={"Authorization": f"Bearer {token}"})

    assert res.status_code == 401
    assert res.json()["status"] == "fail"


def test_correlation_id_is_echoed(client):
    res = client.get("/health", headers={"X-Correlation-ID": "abc-123"})

    assert res.status_code == 200
    assert res.json() == {"status": "healthy"}
    assert res.headers["X-Correlation-ID"] == "abc-123"


def test_unknown_route_uses_failure_envelope(client):
    res = client.get("/nope")

    assert res.status_code == 404
    assert res.json()["status"] == "fail"
