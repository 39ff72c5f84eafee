"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Configure the test environment (APP_ENV=test, no .env file)
  - Provide a frozen clock, a token codec and in-memory repositories

Notes:
  - Fixtures are function-scoped for isolation
"""

import os
from datetime import datetime, timezone
from decimal import Decimal

import pytest

os.environ["APP_ENV"] = "test"

from paydesk.crosscutting import config as app_config  # noqa: E402

app_config.Settings.model_config["env_file"] = None
app_config.get_settings.cache_clear()

from paydesk.identity.token_codec import AuthSettings, TokenCodec  # noqa: E402
from paydesk.infrastructure.repositories import (  # noqa: E402
    InMemoryAttendanceRepository,
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
    InMemoryUserRepository,
)

TEST_SECRET = "test-secret"


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta) -> None:
        self.now = self.now + delta


# ============================================================================
# Time & auth
# ============================================================================


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 3, 15, 9, 30, tzinfo=timezone.utc))


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret=TEST_SECRET)


@pytest.fixture
def codec(auth_settings: AuthSettings, clock: FrozenClock) -> TokenCodec:
    return TokenCodec(auth_settings, clock=clock)


# ============================================================================
# Repositories
# ============================================================================


@pytest.fixture
def user_repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def employee_repo() -> InMemoryEmployeeRepository:
    return InMemoryEmployeeRepository()


@pytest.fixture
def payroll_repo(employee_repo: InMemoryEmployeeRepository) -> InMemoryPayrollRepository:
    return InMemoryPayrollRepository(employee_repo)


@pytest.fixture
def attendance_repo(
    employee_repo: InMemoryEmployeeRepository,
) -> InMemoryAttendanceRepository:
    return InMemoryAttendanceRepository(employee_repo)


@pytest.fixture
def seeded_employees(employee_repo: InMemoryEmployeeRepository):
    """R: Three employees, including the 50000 reference salary."""
    return [
        employee_repo.create_employee(
            name="Asha", email="asha@example.com", department="Ops",
            basic_salary=Decimal("50000"),
        ),
        employee_repo.create_employee(
            name="Ravi", email="ravi@example.com", department="Eng",
            basic_salary=Decimal("12345.67"),
        ),
        employee_repo.create_employee(
            name="Meera", email="meera@example.com", department="HR",
            basic_salary=Decimal("0"),
        ),
    ]
