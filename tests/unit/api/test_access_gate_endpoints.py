"""
Name: Access Gate Endpoint Tests

Responsibilities:
  - Every protected route rejects missing, invalid and expired tokens
    with 401 UNAUTHENTICATED, a reason and WWW-Authenticate: Bearer
  - Public routes stay open
"""

from datetime import timedelta

import pytest

from paydesk.api.main import app
from paydesk.container import get_access_gate, get_auth_settings
from paydesk.identity.access_gate import AccessGate
from paydesk.identity.token_codec import TokenClaims, TokenCodec
from paydesk.identity.users import UserRole

pytestmark = pytest.mark.unit

PROTECTED = [
    ("get", "/api/me"),
    ("get", "/api/employees"),
    ("post", "/api/employees"),
    ("put", "/api/employees/1"),
    ("delete", "/api/employees/1"),
    ("get", "/api/attendance"),
    ("post", "/api/attendance"),
    ("get", "/api/stats"),
    ("get", "/api/payroll"),
    ("post", "/api/payroll"),
]


def _assert_unauthenticated(response, reason: str) -> None:
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    body = response.json()
    assert body["code"] == "UNAUTHENTICATED"
    assert {"reason": reason} in body["errors"]


@pytest.mark.parametrize("method,path", PROTECTED)
def test_missing_token_rejected(client, method, path):
    response = client.request(method, path)

    _assert_unauthenticated(response, "missing_token")


@pytest.mark.parametrize("method,path", PROTECTED)
def test_invalid_token_rejected(client, method, path):
    response = client.request(
        method, path, headers={"Authorization": "Bearer not.a.token"}
    )

    _assert_unauthenticated(response, "invalid_token")


def test_non_bearer_scheme_is_missing_token(client):
    response = client.get("/api/me", headers={"Authorization": "Basic abc"})

    _assert_unauthenticated(response, "missing_token")


def test_expired_token_rejected(client, clock):
    codec = TokenCodec(get_auth_settings(), clock=clock)
    token = codec.issue(TokenClaims(id=1, name="Admin", role=UserRole.ADMIN)).token
    app.dependency_overrides[get_access_gate] = lambda: AccessGate(codec)

    clock.advance(timedelta(hours=10))
    response = client.get("/api/payroll", headers={"Authorization": f"Bearer {token}"})

    _assert_unauthenticated(response, "expired_token")


def test_rejected_call_writes_nothing(client, auth_headers):
    client.post("/api/payroll")

    response = client.get("/api/payroll", headers=auth_headers)

    assert response.status_code == 200
    assert response.json() == []


def test_public_routes_need_no_token(client):
    assert client.get("/healthz").status_code == 200
    assert client.get("/metrics").status_code == 200
