"""
In-Memory Repository Implementations.

For testing and local development. NOT FOR PRODUCTION.
Data is lost on process restart.
"""

from .attendance import InMemoryAttendanceRepository
from .employee import InMemoryEmployeeRepository
from .payroll import InMemoryPayrollRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryAttendanceRepository",
    "InMemoryEmployeeRepository",
    "InMemoryPayrollRepository",
    "InMemoryUserRepository",
]
