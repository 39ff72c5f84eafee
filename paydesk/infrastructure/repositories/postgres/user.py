"""
Name: PostgreSQL User Repository (Credential Store)

Responsibilities:
  - Load users for authentication by email
  - Create users, turning unique_violation on email into DuplicateIdentityError
  - Map database rows into User records
"""

from __future__ import annotations

from typing import Optional

import psycopg
from psycopg import errors as pg_errors

from ....crosscutting.exceptions import DatabaseError, DuplicateIdentityError
from ....identity.users import User, UserRole
from .base import PostgresRepository

_USER_COLUMNS = "id, email, name, password_hash, role, created_at"


class PostgresUserRepository(PostgresRepository):
    """R: PostgreSQL implementation of UserRepository."""

    @staticmethod
    def _row_to_user(row) -> User:
        try:
            role = UserRole(row[4])
        except ValueError as exc:
            raise DatabaseError("Invalid user role in database") from exc

        return User(
            id=row[0],
            email=row[1],
            name=row[2],
            password_hash=row[3],
            role=role,
            created_at=row[5],
        )

    def get_user_by_email(self, email: str) -> Optional[User]:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute(
                    f"SELECT {_USER_COLUMNS} FROM users WHERE email = %s",
                    (email,),
                ).fetchone()
        except psycopg.Error as exc:
            self._fail("User lookup", exc)

        if not row:
            return None
        return self._row_to_user(row)

    def create_user(
        self, *, email: str, name: str, password_hash: str, role: UserRole
    ) -> User:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute(
                    f"""
                    INSERT INTO users (email, name, password_hash, role)
                    VALUES (%s, %s, %s, %s)
                    RETURNING {_USER_COLUMNS}
                    """,
                    (email, name, password_hash, role.value),
                ).fetchone()
        except pg_errors.UniqueViolation as exc:
            raise DuplicateIdentityError("Email already exists") from exc
        except psycopg.Error as exc:
            self._fail("User creation", exc)

        if not row:
            raise DatabaseError("User creation failed: no row returned")
        return self._row_to_user(row)
