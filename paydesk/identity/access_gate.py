"""
Name: Access Gate

Responsibilities:
  - Extract the bearer token from an Authorization header value
  - Verify it via the token codec
  - Produce an explicit AccessContext {id, name, role} or reject

Collaborators:
  - identity/token_codec.py: TokenCodec.verify
  - interfaces/api/http/dependencies.py: FastAPI dependency wrapper

Constraints:
  - Stateless; no revocation list
  - No role-based authorization: any authenticated identity passes
  - A missing token is rejected without attempting verification
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from .token_codec import InvalidTokenError, TokenCodec
from .users import UserRole

BEARER_SCHEME = "bearer"


@dataclass(frozen=True, slots=True)
class AccessContext:
    """Identity attached to a protected call."""

    user_id: int
    name: str
    role: UserRole
    issued_at: datetime | None = None
    expires_at: datetime | None = None

    def identity(self) -> dict[str, object]:
        return {"id": self.user_id, "name": self.name, "role": self.role.value}


class UnauthenticatedError(Exception):
    """The call carries no usable credential."""

    MISSING_TOKEN = "missing_token"
    INVALID_TOKEN = "invalid_token"
    EXPIRED_TOKEN = "expired_token"

    def __init__(self, reason: str, message: str):
        super().__init__(message)
        self.reason = reason
        self.message = message


def extract_bearer_token(authorization: str | None) -> str | None:
    """Extract token from `Authorization: Bearer <token>`."""
    if not authorization:
        return None
    parts = authorization.strip().split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1].strip() or None


class AccessGate:
    """R: Guard run before every protected operation."""

    def __init__(self, codec: TokenCodec) -> None:
        self._codec = codec

    def authenticate(self, authorization: str | None) -> AccessContext:
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthenticatedError(
                UnauthenticatedError.MISSING_TOKEN, "No token found."
            )

        try:
            claims = self._codec.verify(token)
        except InvalidTokenError as exc:
            if exc.is_expired:
                raise UnauthenticatedError(
                    UnauthenticatedError.EXPIRED_TOKEN, "Token expired."
                ) from exc
            raise UnauthenticatedError(
                UnauthenticatedError.INVALID_TOKEN, "Invalid token."
            ) from exc

        return AccessContext(
            user_id=claims.id,
            name=claims.name,
            role=claims.role,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )
