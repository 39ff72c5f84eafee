"""
Name: Auth Use Case Results

Responsibilities:
  - Stable error codes for registration and login
  - Typed results (RegisterResult, LoginResult) instead of raising outward

Collaborators:
  - identity.users.User
  - identity.token_codec.IssuedToken
  - interfaces/api/http/error_mapping.py (maps codes to HTTP)

Notes:
  - USER_NOT_FOUND and WRONG_PASSWORD stay distinguishable
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....identity.token_codec import IssuedToken
from ....identity.users import User


class AuthErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    WRONG_PASSWORD = "WRONG_PASSWORD"
    DATA_SOURCE_FAILURE = "DATA_SOURCE_FAILURE"


@dataclass(frozen=True)
class AuthError:
    code: AuthErrorCode
    message: str
    error_id: str | None = None


@dataclass
class RegisterResult:
    """Contract: error is None => user is present."""

    user: User | None = None
    error: AuthError | None = None


@dataclass
class LoginResult:
    """Contract: error is None => token and user are present."""

    token: IssuedToken | None = None
    user: User | None = None
    error: AuthError | None = None
