"""
Name: In-Memory User Repository

Responsibilities:
  - Store users in a dict keyed by email (tests / local dev)
  - Enforce email uniqueness like the users.email constraint

Constraints:
  - Thread-safe: every access under a Lock
  - Data is lost on process restart
"""

from __future__ import annotations

from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Optional

from ....crosscutting.exceptions import DuplicateIdentityError
from ....identity.users import User, UserRole


class InMemoryUserRepository:
    def __init__(self) -> None:
        self._lock = Lock()
        self._users: Dict[str, User] = {}
        self._next_id = 1

    def get_user_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self._users.get(email)

    def create_user(
        self, *, email: str, name: str, password_hash: str, role: UserRole
    ) -> User:
        with self._lock:
            if email in self._users:
                raise DuplicateIdentityError("Email already exists")
            user = User(
                id=self._next_id,
                email=email,
                name=name,
                password_hash=password_hash,
                role=role,
                created_at=datetime.now(timezone.utc),
            )
            self._users[email] = user
            self._next_id += 1
            return user
