"""
Name: Login User Use Case

Responsibilities:
  - Look up the user by normalized email
  - Verify the password against the stored Argon2 hash
  - Issue a 10-hour access token embedding {id, name, role}

Collaborators:
  - domain.repositories.UserRepository
  - identity.passwords.verify_password
  - identity.token_codec.TokenCodec

Error Mapping:
  - USER_NOT_FOUND: no user with that email
  - WRONG_PASSWORD: password mismatch (no token issued)
  - DATA_SOURCE_FAILURE: storage unavailable
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_login
from ....domain.repositories import UserRepository
from ....identity.passwords import verify_password
from ....identity.token_codec import ACCESS_TOKEN_TTL, TokenClaims, TokenCodec
from .auth_results import AuthError, AuthErrorCode, LoginResult
from .register_user import normalize_email


@dataclass(frozen=True)
class LoginUserInput:
    email: str
    password: str


class LoginUserUseCase:
    """R: Exchange email/password for an access token."""

    def __init__(
        self,
        repository: UserRepository,
        codec: TokenCodec,
        password_verifier: Callable[[str, str], bool] = verify_password,
    ) -> None:
        self._users = repository
        self._codec = codec
        self._verify = password_verifier

    def execute(self, input_data: LoginUserInput) -> LoginResult:
        email = normalize_email(input_data.email)

        try:
            user = self._users.get_user_by_email(email) if email else None
        except DatabaseError as exc:
            logger.error(
                "Login failed: data source error", extra={"error_id": exc.error_id}
            )
            record_login("error")
            return LoginResult(
                error=AuthError(
                    code=AuthErrorCode.DATA_SOURCE_FAILURE,
                    message="Login failed.",
                    error_id=exc.error_id,
                )
            )

        if user is None:
            logger.warning("Login failed: unknown email")
            record_login("user_not_found")
            return LoginResult(
                error=AuthError(code=AuthErrorCode.USER_NOT_FOUND, message="User not found.")
            )

        if not self._verify(input_data.password or "", user.password_hash):
            logger.warning("Login failed: wrong password", extra={"user_id": user.id})
            record_login("wrong_password")
            return LoginResult(
                error=AuthError(code=AuthErrorCode.WRONG_PASSWORD, message="Wrong password.")
            )

        issued = self._codec.issue(
            TokenClaims(id=user.id, name=user.name, role=user.role),
            ttl=ACCESS_TOKEN_TTL,
        )
        logger.info("Login succeeded", extra={"user_id": user.id})
        record_login("success")
        return LoginResult(token=issued, user=user)
