"""
Name: Registration Role Policy

Responsibilities:
  - Resolve the role requested at registration into the stored UserRole

Notes:
  - The requested role is client-supplied and trusted as-is (absent ->
    employee). This is the single place to harden role assignment.
"""

from __future__ import annotations

from .users import UserRole

DEFAULT_ROLE = UserRole.EMPLOYEE


class UnknownRoleError(ValueError):
    """Requested role is not a known UserRole."""


def resolve_registration_role(requested: UserRole | str | None) -> UserRole:
    """R: Map the requested role to a UserRole (default employee)."""
    if requested is None:
        return DEFAULT_ROLE
    if isinstance(requested, UserRole):
        return requested

    value = requested.strip().lower()
    if not value:
        return DEFAULT_ROLE
    try:
        return UserRole(value)
    except ValueError as exc:
        raise UnknownRoleError(f"Unknown role: {requested!r}") from exc
