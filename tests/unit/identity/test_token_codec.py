"""
Name: Token Codec Tests

Responsibilities:
  - Issued tokens carry the identity claims and expire exactly TTL later
  - Tampered, foreign, malformed and expired tokens are rejected
"""

from datetime import timedelta

import jwt
import pytest
from jwt.utils import base64url_decode, base64url_encode

from paydesk.identity.token_codec import (
    AuthSettings,
    InvalidTokenError,
    TokenClaims,
    TokenCodec,
)
from paydesk.identity.users import UserRole

pytestmark = pytest.mark.unit


def _claims() -> TokenClaims:
    return TokenClaims(id=7, name="Asha", role=UserRole.ADMIN)


def _flip_signature_bit(token: str) -> str:
    header, payload, signature = token.split(".")
    raw = bytearray(base64url_decode(signature))
    raw[0] ^= 0x01
    return ".".join([header, payload, base64url_encode(bytes(raw)).decode()])


def test_issue_then_verify_returns_same_identity(codec):
    issued = codec.issue(_claims())

    claims = codec.verify(issued.token)

    assert claims.identity() == {"id": 7, "name": "Asha", "role": "admin"}
    assert claims.expires_at == issued.expires_at


def test_token_expires_exactly_ten_hours_after_issue(codec):
    issued = codec.issue(_claims())

    payload = jwt.decode(issued.token, options={"verify_signature": False})

    assert payload["exp"] - payload["iat"] == 36000
    assert issued.expires_in == 36000
    assert payload["typ"] == "access"


def test_custom_ttl_overrides_default(codec):
    issued = codec.issue(_claims(), ttl=timedelta(minutes=5))

    assert issued.expires_in == 300


def test_zero_ttl_is_honoured(codec):
    issued = codec.issue(_claims(), ttl=timedelta(0))

    assert issued.expires_in == 0
    with pytest.raises(InvalidTokenError) as exc_info:
        codec.verify(issued.token)
    assert exc_info.value.is_expired


def test_token_valid_until_last_second(codec, clock):
    issued = codec.issue(_claims())

    clock.advance(timedelta(hours=10) - timedelta(seconds=1))

    assert codec.verify(issued.token).id == 7


def test_token_rejected_at_expiry(codec, clock):
    issued = codec.issue(_claims())

    clock.advance(timedelta(hours=10))

    with pytest.raises(InvalidTokenError) as exc_info:
        codec.verify(issued.token)
    assert exc_info.value.is_expired


def test_bit_flipped_signature_rejected(codec):
    issued = codec.issue(_claims())

    with pytest.raises(InvalidTokenError) as exc_info:
        codec.verify(_flip_signature_bit(issued.token))
    assert not exc_info.value.is_expired


def test_token_signed_with_other_secret_rejected(codec, clock):
    other = TokenCodec(
        AuthSettings(jwt_secret="another-secret"),
        clock=clock,
    )
    token = other.issue(_claims()).token

    with pytest.raises(InvalidTokenError):
        codec.verify(token)


@pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
def test_malformed_token_rejected(codec, token):
    with pytest.raises(InvalidTokenError):
        codec.verify(token)


def test_missing_role_claim_rejected(codec, clock, auth_settings):
    now = int(clock().timestamp())
    token = jwt.encode(
        {"id": 1, "name": "Asha", "iat": now, "exp": now + 60, "typ": "access"},
        auth_settings.jwt_secret,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        codec.verify(token)


def test_unknown_role_rejected(codec, clock, auth_settings):
    now = int(clock().timestamp())
    token = jwt.encode(
        {
            "id": 1,
            "name": "Asha",
            "role": "superuser",
            "iat": now,
            "exp": now + 60,
            "typ": "access",
        },
        auth_settings.jwt_secret,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError):
        codec.verify(token)


def test_wrong_token_type_rejected(codec, clock, auth_settings):
    now = int(clock().timestamp())
    token = jwt.encode(
        {
            "id": 1,
            "name": "Asha",
            "role": "employee",
            "iat": now,
            "exp": now + 60,
            "typ": "refresh",
        },
        auth_settings.jwt_secret,
        algorithm="HS256",
    )

    with pytest.raises(InvalidTokenError, match="type"):
        codec.verify(token)
