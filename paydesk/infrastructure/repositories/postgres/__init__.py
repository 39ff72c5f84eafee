from .attendance import PostgresAttendanceRepository
from .employee import PostgresEmployeeRepository
from .payroll import PostgresPayrollRepository
from .user import PostgresUserRepository

__all__ = [
    "PostgresAttendanceRepository",
    "PostgresEmployeeRepository",
    "PostgresPayrollRepository",
    "PostgresUserRepository",
]
