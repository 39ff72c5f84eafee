"""
Name: User Models

Responsibilities:
  - Define user roles and the user record used by authentication
  - Keep auth-specific data shapes centralized

Collaborators:
  - identity/token_codec.py: embeds id/name/role in access tokens
  - identity/role_policy.py: resolves the role stored at registration
  - infrastructure/repositories: map rows -> User
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class UserRole(str, Enum):
    """R: Supported user roles."""

    ADMIN = "admin"
    EMPLOYEE = "employee"


@dataclass(frozen=True, slots=True)
class User:
    """R: User record used by authentication flows."""

    id: int
    email: str
    name: str
    password_hash: str
    role: UserRole
    created_at: datetime | None = None
