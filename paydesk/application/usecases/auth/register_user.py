"""
Name: Register User Use Case

Responsibilities:
  - Validate and normalize registration input
  - Resolve the stored role through the role policy seam
  - Hash the password and persist the user

Collaborators:
  - domain.repositories.UserRepository
  - identity.passwords.hash_password
  - identity.role_policy.resolve_registration_role

Error Mapping:
  - VALIDATION_ERROR: blank name/email/password, unknown role
  - DUPLICATE_IDENTITY: email already registered (storage uniqueness)
  - DATA_SOURCE_FAILURE: storage unavailable
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from ....crosscutting.exceptions import DatabaseError, DuplicateIdentityError
from ....crosscutting.logger import logger
from ....domain.repositories import UserRepository
from ....identity.passwords import hash_password
from ....identity.role_policy import UnknownRoleError, resolve_registration_role
from ....identity.users import UserRole
from .auth_results import AuthError, AuthErrorCode, RegisterResult


def normalize_email(email: str | None) -> str:
    return (email or "").strip().lower()


@dataclass(frozen=True)
class RegisterUserInput:
    name: str
    email: str
    password: str
    role: UserRole | str | None = None


class RegisterUserUseCase:
    """R: Create a credential record for a new user."""

    def __init__(
        self,
        repository: UserRepository,
        password_hasher: Callable[[str], str] = hash_password,
    ) -> None:
        self._users = repository
        self._hash = password_hasher

    def execute(self, input_data: RegisterUserInput) -> RegisterResult:
        name = (input_data.name or "").strip()
        email = normalize_email(input_data.email)

        if not name:
            return self._error(AuthErrorCode.VALIDATION_ERROR, "Name is required.")
        if not email:
            return self._error(AuthErrorCode.VALIDATION_ERROR, "Email is required.")
        if not input_data.password:
            return self._error(
                AuthErrorCode.VALIDATION_ERROR, "Password is required."
            )

        try:
            role = resolve_registration_role(input_data.role)
        except UnknownRoleError as exc:
            return self._error(AuthErrorCode.VALIDATION_ERROR, str(exc))

        try:
            user = self._users.create_user(
                email=email,
                name=name,
                password_hash=self._hash(input_data.password),
                role=role,
            )
        except DuplicateIdentityError:
            logger.info("Registration rejected: email exists")
            return self._error(
                AuthErrorCode.DUPLICATE_IDENTITY, "Email already exists."
            )
        except DatabaseError as exc:
            logger.error(
                "Registration failed: data source error",
                extra={"error_id": exc.error_id},
            )
            return RegisterResult(
                error=AuthError(
                    code=AuthErrorCode.DATA_SOURCE_FAILURE,
                    message="Registration failed.",
                    error_id=exc.error_id,
                )
            )

        logger.info(
            "User registered", extra={"user_id": user.id, "role": user.role.value}
        )
        return RegisterResult(user=user)

    @staticmethod
    def _error(code: AuthErrorCode, message: str) -> RegisterResult:
        return RegisterResult(error=AuthError(code=code, message=message))
