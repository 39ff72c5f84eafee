"""
Name: RFC 7807 Error Response Tests

Responsibilities:
  - Factories carry the right status and code
  - Handler output is application/problem+json with request_id
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from paydesk.api.exception_handlers import register_exception_handlers
from paydesk.crosscutting.error_responses import (
    ErrorCode,
    already_generated,
    data_source_failure,
    unauthenticated,
    wrong_password,
)
from paydesk.crosscutting.exceptions import DuplicateIdentityError
from paydesk.crosscutting.middleware import RequestContextMiddleware

pytestmark = pytest.mark.unit


def test_unauthenticated_carries_reason_and_challenge():
    exc = unauthenticated("Token expired.", reason="expired_token")

    assert exc.status_code == 401
    assert exc.code == ErrorCode.UNAUTHENTICATED
    assert exc.errors == [{"reason": "expired_token"}]
    assert exc.headers == {"WWW-Authenticate": "Bearer"}


def test_wrong_password_is_401():
    assert wrong_password().status_code == 401


def test_already_generated_is_409_with_period():
    exc = already_generated("2024-03")

    assert exc.status_code == 409
    assert exc.errors == [{"period": "2024-03"}]


def test_data_source_failure_is_503():
    exc = data_source_failure(error_id="abc")

    assert exc.status_code == 503
    assert exc.errors == [{"error_id": "abc"}]


def _build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)
    app.add_middleware(RequestContextMiddleware)

    @app.get("/conflict")
    def conflict():
        raise already_generated("2024-03")

    @app.get("/duplicate")
    def duplicate():
        raise DuplicateIdentityError("Email already exists")

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    return app


def test_problem_json_shape():
    client = TestClient(_build_app())

    response = client.get("/conflict", headers={"X-Request-Id": "rid-1"})

    assert response.status_code == 409
    assert response.headers["content-type"].startswith("application/problem+json")
    body = response.json()
    assert body["code"] == "ALREADY_GENERATED"
    assert body["status"] == 409
    assert body["title"] == "Already Generated"
    assert body["instance"].endswith("/conflict")
    assert {"request_id": "rid-1"} in body["errors"]


def test_duplicate_identity_exception_is_409():
    client = TestClient(_build_app())

    response = client.get("/duplicate")

    assert response.status_code == 409
    assert response.json()["code"] == "DUPLICATE_IDENTITY"


def test_unhandled_exception_is_generic_500():
    client = TestClient(_build_app(), raise_server_exceptions=False)

    response = client.get("/boom")

    assert response.status_code == 500
    assert "secret internals" not in response.text
    assert response.json()["code"] == "INTERNAL_ERROR"
