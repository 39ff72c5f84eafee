"""
Name: Access Token Codec (JWT)

Responsibilities:
  - Issue signed access tokens carrying {id, name, role} and an expiry
  - Verify tokens (signature, shape, type, expiry)

Collaborators:
  - PyJWT (HS256)
  - container.py: builds the codec once from an AuthSettings snapshot
  - identity/access_gate.py: verifies bearer tokens

Constraints:
  - The codec never reads global settings; the secret is passed in
  - Expiry is checked against the codec's clock (injectable for tests)
  - Never log tokens or the secret

Notes:
  - Claims: id, name, role, iat, exp, typ
  - exp = iat + ttl exactly (integer seconds); access tokens live 10 hours
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Callable

import jwt

from .users import UserRole

JWT_ALGORITHM: str = "HS256"

CLAIM_ID: str = "id"
CLAIM_NAME: str = "name"
CLAIM_ROLE: str = "role"
CLAIM_IAT: str = "iat"
CLAIM_EXP: str = "exp"
CLAIM_TYP: str = "typ"

TOKEN_TYPE_ACCESS: str = "access"

ACCESS_TOKEN_TTL = timedelta(hours=10)

REQUIRED_CLAIMS = [CLAIM_ID, CLAIM_NAME, CLAIM_ROLE, CLAIM_IAT, CLAIM_EXP]


@dataclass(frozen=True, slots=True)
class AuthSettings:
    """Auth settings snapshot (taken once at startup)."""

    jwt_secret: str


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """Identity claims embedded in an access token."""

    id: int
    name: str
    role: UserRole
    issued_at: datetime | None = None
    expires_at: datetime | None = None

    def identity(self) -> dict[str, object]:
        return {"id": self.id, "name": self.name, "role": self.role.value}


@dataclass(frozen=True, slots=True)
class IssuedToken:
    token: str
    issued_at: datetime
    expires_at: datetime

    @property
    def expires_in(self) -> int:
        return int((self.expires_at - self.issued_at).total_seconds())


class InvalidTokenError(Exception):
    """Token is malformed, tampered with, of the wrong type, or expired."""

    EXPIRED = "expired"
    INVALID = "invalid"

    def __init__(self, message: str, reason: str = INVALID):
        super().__init__(message)
        self.reason = reason

    @property
    def is_expired(self) -> bool:
        return self.reason == self.EXPIRED


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenCodec:
    """R: Sign and verify access tokens with a server-held secret."""

    def __init__(
        self,
        settings: AuthSettings,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = settings.jwt_secret
        self._default_ttl = ACCESS_TOKEN_TTL
        self._clock = clock

    def issue(self, claims: TokenClaims, ttl: timedelta | None = None) -> IssuedToken:
        """Sign a token for `claims`, expiring `ttl` (default: ten hours) from now."""
        issued_at = self._clock().replace(microsecond=0)
        expires_at = issued_at + (ttl if ttl is not None else self._default_ttl)

        payload: dict[str, object] = {
            **claims.identity(),
            CLAIM_IAT: int(issued_at.timestamp()),
            CLAIM_EXP: int(expires_at.timestamp()),
            CLAIM_TYP: TOKEN_TYPE_ACCESS,
        }
        token = jwt.encode(payload, self._secret, algorithm=JWT_ALGORITHM)
        return IssuedToken(token=token, issued_at=issued_at, expires_at=expires_at)

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate an access token.

        Raises:
            InvalidTokenError: bad signature, malformed token, missing or
                invalid claims, wrong type, or expired (reason="expired")
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[JWT_ALGORITHM],
                options={
                    "require": REQUIRED_CLAIMS,
                    "verify_exp": False,
                    "verify_iat": False,
                },
            )
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError("Invalid token.") from exc

        user_id = payload.get(CLAIM_ID)
        name = payload.get(CLAIM_NAME)
        exp = payload.get(CLAIM_EXP)
        iat = payload.get(CLAIM_IAT)

        if not isinstance(user_id, int) or isinstance(user_id, bool):
            raise InvalidTokenError("Invalid token.")
        if not isinstance(name, str):
            raise InvalidTokenError("Invalid token.")
        if not isinstance(exp, int) or not isinstance(iat, int):
            raise InvalidTokenError("Invalid token.")
        if payload.get(CLAIM_TYP) != TOKEN_TYPE_ACCESS:
            raise InvalidTokenError("Invalid token type.")

        try:
            role = UserRole(str(payload.get(CLAIM_ROLE)))
        except ValueError as exc:
            raise InvalidTokenError("Invalid token.") from exc

        # R: exp is exclusive; a token is dead from its expiry second onwards.
        if int(self._clock().timestamp()) >= exp:
            raise InvalidTokenError("Token expired.", reason=InvalidTokenError.EXPIRED)

        return TokenClaims(
            id=user_id,
            name=name,
            role=role,
            issued_at=datetime.fromtimestamp(iat, tz=timezone.utc),
            expires_at=datetime.fromtimestamp(exp, tz=timezone.utc),
        )
