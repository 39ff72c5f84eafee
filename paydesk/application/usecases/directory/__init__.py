from .attendance import ListAttendanceUseCase, MarkAttendanceInput, MarkAttendanceUseCase
from .directory_results import (
    AttendanceResult,
    DeleteEmployeeResult,
    DirectoryError,
    DirectoryErrorCode,
    EmployeeResult,
)
from .employees import (
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    EmployeeInput,
    ListEmployeesUseCase,
    UpdateEmployeeUseCase,
)
from .stats import DashboardStats, GetStatsUseCase

__all__ = [
    "AttendanceResult",
    "CreateEmployeeUseCase",
    "DashboardStats",
    "DeleteEmployeeResult",
    "DeleteEmployeeUseCase",
    "DirectoryError",
    "DirectoryErrorCode",
    "EmployeeInput",
    "EmployeeResult",
    "GetStatsUseCase",
    "ListAttendanceUseCase",
    "ListEmployeesUseCase",
    "MarkAttendanceInput",
    "MarkAttendanceUseCase",
    "UpdateEmployeeUseCase",
]
