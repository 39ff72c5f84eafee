"""
Name: Access Gate Tests

Responsibilities:
  - Missing, malformed, tampered and expired credentials are rejected
    with a distinguishable reason
  - A valid bearer token yields an explicit AccessContext
"""

from datetime import timedelta

import pytest

from paydesk.identity.access_gate import (
    AccessGate,
    UnauthenticatedError,
    extract_bearer_token,
)
from paydesk.identity.token_codec import TokenClaims
from paydesk.identity.users import UserRole

pytestmark = pytest.mark.unit


@pytest.fixture
def gate(codec) -> AccessGate:
    return AccessGate(codec)


@pytest.fixture
def token(codec) -> str:
    return codec.issue(TokenClaims(id=3, name="Ravi", role=UserRole.EMPLOYEE)).token


@pytest.mark.parametrize(
    "header,expected",
    [
        (None, None),
        ("", None),
        ("Bearer", None),
        ("Bearer   ", None),
        ("Basic abc", None),
        ("Bearer abc", "abc"),
        ("bearer abc", "abc"),
    ],
)
def test_extract_bearer_token(header, expected):
    assert extract_bearer_token(header) == expected


def test_valid_token_produces_access_context(gate, token):
    access = gate.authenticate(f"Bearer {token}")

    assert access.identity() == {"id": 3, "name": "Ravi", "role": "employee"}
    assert access.expires_at is not None


@pytest.mark.parametrize("header", [None, "", "Token abc", "Bearer "])
def test_missing_token_rejected(gate, header):
    with pytest.raises(UnauthenticatedError) as exc_info:
        gate.authenticate(header)
    assert exc_info.value.reason == UnauthenticatedError.MISSING_TOKEN


def test_garbage_token_rejected_as_invalid(gate):
    with pytest.raises(UnauthenticatedError) as exc_info:
        gate.authenticate("Bearer garbage")
    assert exc_info.value.reason == UnauthenticatedError.INVALID_TOKEN


def test_expired_token_rejected_as_expired(gate, token, clock):
    clock.advance(timedelta(hours=11))

    with pytest.raises(UnauthenticatedError) as exc_info:
        gate.authenticate(f"Bearer {token}")
    assert exc_info.value.reason == UnauthenticatedError.EXPIRED_TOKEN
