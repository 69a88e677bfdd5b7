"""Registration, login, the users directory and the error envelope."""

from __future__ import annotations

from fastapi.testclient import TestClient

from app.database import get_db
from app.utils.security import create_access_token
from conftest import PASSWORD, auth_headers
from main import app


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"message": "Server is running"}


def test_register_returns_token_and_member_profile(client: TestClient) -> None:
    response = client.post(
        "/api/auth/register",
        json={"name": " Dana ", "email": "Dana@Example.com", "password": "secret1"},
    )

    assert response.status_code == 201, response.text
    payload = response.json()
    assert payload["success"] is True
    assert payload["token"]
    assert payload["user"]["name"] == "Dana"
    assert payload["user"]["email"] == "dana@example.com"
    assert payload["user"]["role"] == "member"
    assert not any("password" in key.lower() for key in payload["user"])

    me = client.get("/api/auth/me", headers={"Authorization": f"Bearer {payload['token']}"})
    assert me.status_code == 200
    assert me.json()["data"]["email"] == "dana@example.com"


def test_register_rejects_duplicates_and_bad_input(client: TestClient, alice) -> None:
    duplicate = client.post(
        "/api/auth/register",
        json={"name": "Alice again", "email": "ALICE@example.com", "password": "secret1"},
    )
    assert duplicate.status_code == 400
    assert duplicate.json() == {"success": False, "message": "User already exists"}

    short = client.post(
        "/api/auth/register",
        json={"name": "Eve", "email": "eve@example.com", "password": "12345"},
    )
    assert short.status_code == 400
    assert short.json()["message"] == "Password must be at least 6 characters"

    bad_email = client.post(
        "/api/auth/register",
        json={"name": "Eve", "email": "not-an-email", "password": "secret1"},
    )
    assert bad_email.status_code == 400
    assert bad_email.json()["success"] is False


def test_register_cannot_choose_role(client: TestClient) -> None:
    response = client.post(
        "/api/auth/register",
        json={"name": "Mallory", "email": "mallory@example.com", "password": "secret1", "role": "admin"},
    )
    assert response.status_code == 201
    assert response.json()["user"]["role"] == "member"


def test_login(client: TestClient, alice) -> None:
    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": PASSWORD})

    assert response.status_code == 200
    payload = response.json()
    assert payload["user"]["id"] == alice.id
    assert client.get(
        "/api/tasks", headers={"Authorization": f"Bearer {payload['token']}"}
    ).status_code == 200


def test_login_with_wrong_password(client: TestClient, alice) -> None:
    response = client.post("/api/auth/login", json={"email": "alice@example.com", "password": "nope-nope"})
    assert response.status_code == 401
    assert response.json() == {"success": False, "message": "Invalid credentials"}

    unknown = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": PASSWORD})
    assert unknown.status_code == 401


def test_token_for_missing_user_is_rejected(client: TestClient) -> None:
    token = create_access_token({"sub": "9999"})

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Not authorized, user no longer exists"


def test_users_directory(client: TestClient, alice, bob, admin) -> None:
    response = client.get("/api/users", headers=auth_headers(alice))

    assert response.status_code == 200
    payload = response.json()
    assert payload["count"] == 3
    assert [user["name"] for user in payload["data"]] == ["Admin", "Alice", "Bob"]
    assert payload["data"][0]["role"] == "admin"
    for user in payload["data"]:
        assert not any("password" in key.lower() for key in user)


def test_unexpected_error_uses_envelope(session_factory, alice) -> None:
    def broken_db():
        raise RuntimeError("database exploded")
        yield  # pragma: no cover

    app.dependency_overrides[get_db] = broken_db
    try:
        client = TestClient(app, raise_server_exceptions=False)
        response = client.get("/api/users", headers=auth_headers(alice))
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json() == {"success": False, "message": "Server error"}


def test_token_with_malformed_subject_is_rejected(client: TestClient) -> None:
    for subject in ("99999999999999999999", "1_0", "abc"):
        token = create_access_token({"sub": subject})
        response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})
        assert response.status_code == 401, subject
