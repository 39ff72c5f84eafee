from .in_memory import (
    InMemoryAttendanceRepository,
    InMemoryEmployeeRepository,
    InMemoryPayrollRepository,
    InMemoryUserRepository,
)
from .postgres import (
    PostgresAttendanceRepository,
    PostgresEmployeeRepository,
    PostgresPayrollRepository,
    PostgresUserRepository,
)

__all__ = [
    "InMemoryAttendanceRepository",
    "InMemoryEmployeeRepository",
    "InMemoryPayrollRepository",
    "InMemoryUserRepository",
    "PostgresAttendanceRepository",
    "PostgresEmployeeRepository",
    "PostgresPayrollRepository",
    "PostgresUserRepository",
]
