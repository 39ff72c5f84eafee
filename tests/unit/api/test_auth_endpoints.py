"""
Name: Auth Endpoint Tests

Responsibilities:
  - /api/register: 201, duplicate 409, validation 422
  - /api/login: token shape, USER_NOT_FOUND 404, WRONG_PASSWORD 401
  - /api/me echoes the identity carried by the token
"""

import pytest

from paydesk.container import clear_container_caches
from paydesk.crosscutting.config import get_settings

pytestmark = pytest.mark.unit


def _register(client, **overrides):
    payload = {"name": "Asha", "email": "asha@example.com", "password": "pw-123"}
    payload.update(overrides)
    return client.post("/api/register", json=payload)


def test_register_created(client):
    response = _register(client)

    assert response.status_code == 201
    assert response.json() == {"message": "User registered"}


def test_register_duplicate_email_conflict(client):
    assert _register(client).status_code == 201

    response = _register(client, email="ASHA@example.com")

    assert response.status_code == 409
    assert response.headers["content-type"].startswith("application/problem+json")
    assert response.json()["code"] == "DUPLICATE_IDENTITY"


def test_register_missing_password_is_validation_error(client):
    response = client.post(
        "/api/register", json={"name": "Asha", "email": "asha@example.com"}
    )

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_register_unknown_role_is_validation_error(client):
    response = _register(client, role="superuser")

    assert response.status_code == 422
    assert response.json()["code"] == "VALIDATION_ERROR"


def test_login_returns_token_and_user(client):
    _register(client, role="admin")

    response = client.post(
        "/api/login", json={"email": "Asha@Example.com", "password": "pw-123"}
    )

    assert response.status_code == 200
    body = response.json()
    assert body["token"]
    assert body["token_type"] == "bearer"
    assert body["expires_in"] == 36000
    assert body["user"]["email"] == "asha@example.com"
    assert body["user"]["role"] == "admin"
    assert "password_hash" not in body["user"]


def test_login_wrong_password(client):
    _register(client)

    response = client.post(
        "/api/login", json={"email": "asha@example.com", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json()["code"] == "WRONG_PASSWORD"
    assert "token" not in response.json()


def test_login_unknown_user(client):
    response = client.post(
        "/api/login", json={"email": "ghost@example.com", "password": "pw"}
    )

    assert response.status_code == 404
    assert response.json()["code"] == "USER_NOT_FOUND"


def test_login_token_opens_protected_route(client):
    _register(client)
    token = client.post(
        "/api/login", json={"email": "asha@example.com", "password": "pw-123"}
    ).json()["token"]

    response = client.get("/api/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Asha"
    assert body["role"] == "employee"
    assert body["expires_at"]


def test_login_token_lifetime_ignores_environment(client, monkeypatch):
    monkeypatch.setenv("JWT_ACCESS_TTL_MINUTES", "5")
    get_settings.cache_clear()
    clear_container_caches()
    try:
        _register(client)
        response = client.post(
            "/api/login", json={"email": "asha@example.com", "password": "pw-123"}
        )
    finally:
        get_settings.cache_clear()
        clear_container_caches()

    assert response.status_code == 200
    assert response.json()["expires_in"] == 36000
