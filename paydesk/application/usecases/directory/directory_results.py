"""
Name: Directory Use Case Results

Responsibilities:
  - Error codes and typed results for employee / attendance CRUD
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ....domain.entities import AttendanceRecord, Employee


class DirectoryErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class DirectoryError:
    code: DirectoryErrorCode
    message: str
    resource: str = "Employee"
    identifier: str | None = None


@dataclass
class EmployeeResult:
    employee: Employee | None = None
    error: DirectoryError | None = None


@dataclass
class DeleteEmployeeResult:
    deleted: bool
    error: DirectoryError | None = None


@dataclass
class AttendanceResult:
    record: AttendanceRecord | None = None
    error: DirectoryError | None = None
