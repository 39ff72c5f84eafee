"""
Name: Registration Role Policy Tests
"""

import pytest

from paydesk.identity.role_policy import (
    DEFAULT_ROLE,
    UnknownRoleError,
    resolve_registration_role,
)
from paydesk.identity.users import UserRole

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("requested", [None, "", "   "])
def test_absent_role_defaults_to_employee(requested):
    assert resolve_registration_role(requested) == DEFAULT_ROLE == UserRole.EMPLOYEE


@pytest.mark.parametrize(
    "requested,expected",
    [
        ("admin", UserRole.ADMIN),
        (" Admin ", UserRole.ADMIN),
        ("employee", UserRole.EMPLOYEE),
        (UserRole.ADMIN, UserRole.ADMIN),
    ],
)
def test_requested_role_is_trusted(requested, expected):
    assert resolve_registration_role(requested) == expected


def test_unknown_role_rejected():
    with pytest.raises(UnknownRoleError, match="superuser"):
        resolve_registration_role("superuser")
