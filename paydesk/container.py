"""
Name: Composition Root (manual DI)

Responsibilities:
  - Compose repositories, the token codec and use cases (DIP)
  - Expose factories for FastAPI (Depends)
  - Keep singletons cached (lru_cache) for shared resources
  - Read Settings once and hand explicit snapshots to collaborators

Collaborators:
  - crosscutting.config.get_settings
  - domain.repositories (ports)
  - infrastructure.repositories (postgres / in_memory)
  - identity.token_codec / identity.access_gate
  - application.usecases

Notes:
  - No business logic here
  - app_env=test selects the in-memory repositories
"""

from __future__ import annotations

from functools import lru_cache

from .application.usecases.auth import LoginUserUseCase, RegisterUserUseCase
from .application.usecases.directory import (
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    GetStatsUseCase,
    ListAttendanceUseCase,
    ListEmployeesUseCase,
    MarkAttendanceUseCase,
    UpdateEmployeeUseCase,
)
from .application.usecases.payroll import GeneratePayrollUseCase, ListPayrollUseCase
from .crosscutting.config import get_settings
from .domain.repositories import (
    AttendanceRepository,
    EmployeeRepository,
    PayrollRepository,
    UserRepository,
)
from .identity.access_gate import AccessGate
from .identity.token_codec import AuthSettings, TokenCodec
from .infrastructure.repositories import (
    InMemoryAttendanceRepository,
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
    InMemoryUserRepository,
    PostgresAttendanceRepository,
    PostgresEmployeeRepository,
    PostgresPayrollRepository,
    PostgresUserRepository,
)


def _is_test_env() -> bool:
    return get_settings().is_testing


# =============================================================================
# Auth
# =============================================================================


@lru_cache(maxsize=1)
def get_auth_settings() -> AuthSettings:
    """Auth snapshot taken once from Settings."""
    settings = get_settings()
    return AuthSettings(jwt_secret=settings.jwt_secret)


@lru_cache(maxsize=1)
def get_token_codec() -> TokenCodec:
    return TokenCodec(get_auth_settings())


@lru_cache(maxsize=1)
def get_access_gate() -> AccessGate:
    return AccessGate(get_token_codec())


# =============================================================================
# Repositories (singletons)
# =============================================================================


@lru_cache(maxsize=1)
def get_user_repository() -> UserRepository:
    """Credential store (in-memory in test; Postgres at runtime)."""
    if _is_test_env():
        return InMemoryUserRepository()
    return PostgresUserRepository()


@lru_cache(maxsize=1)
def get_employee_repository() -> EmployeeRepository:
    if _is_test_env():
        return InMemoryEmployeeRepository()
    return PostgresEmployeeRepository()


@lru_cache(maxsize=1)
def get_attendance_repository() -> AttendanceRepository:
    if _is_test_env():
        return InMemoryAttendanceRepository(get_employee_repository())
    return PostgresAttendanceRepository()


@lru_cache(maxsize=1)
def get_payroll_repository() -> PayrollRepository:
    """Payroll ledger (in-memory in test; Postgres at runtime)."""
    if _is_test_env():
        return InMemoryPayrollRepository(get_employee_repository())
    return PostgresPayrollRepository()


def clear_container_caches() -> None:
    """R: Drop cached singletons (tests, settings reload)."""
    for factory in (
        get_auth_settings,
        get_token_codec,
        get_access_gate,
        get_user_repository,
        get_employee_repository,
        get_attendance_repository,
        get_payroll_repository,
    ):
        factory.cache_clear()


# =============================================================================
# Use cases (per request)
# =============================================================================


def get_register_user_use_case() -> RegisterUserUseCase:
    return RegisterUserUseCase(repository=get_user_repository())


def get_login_user_use_case() -> LoginUserUseCase:
    return LoginUserUseCase(repository=get_user_repository(), codec=get_token_codec())


def get_generate_payroll_use_case() -> GeneratePayrollUseCase:
    return GeneratePayrollUseCase(
        employees=get_employee_repository(),
        ledger=get_payroll_repository(),
    )


def get_list_payroll_use_case() -> ListPayrollUseCase:
    return ListPayrollUseCase(repository=get_payroll_repository())


def get_list_employees_use_case() -> ListEmployeesUseCase:
    return ListEmployeesUseCase(repository=get_employee_repository())


def get_create_employee_use_case() -> CreateEmployeeUseCase:
    return CreateEmployeeUseCase(repository=get_employee_repository())


def get_update_employee_use_case() -> UpdateEmployeeUseCase:
    return UpdateEmployeeUseCase(repository=get_employee_repository())


def get_delete_employee_use_case() -> DeleteEmployeeUseCase:
    return DeleteEmployeeUseCase(repository=get_employee_repository())


def get_mark_attendance_use_case() -> MarkAttendanceUseCase:
    return MarkAttendanceUseCase(
        attendance=get_attendance_repository(),
        employees=get_employee_repository(),
    )


def get_list_attendance_use_case() -> ListAttendanceUseCase:
    return ListAttendanceUseCase(attendance=get_attendance_repository())


def get_stats_use_case() -> GetStatsUseCase:
    return GetStatsUseCase(
        employees=get_employee_repository(),
        payroll=get_payroll_repository(),
        attendance=get_attendance_repository(),
    )
