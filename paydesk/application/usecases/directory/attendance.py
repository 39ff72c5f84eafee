"""
Name: Attendance Use Cases

Responsibilities:
  - Mark attendance for an existing employee
  - List attendance marks with the employee name
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import List

from ....domain.entities import AttendanceRecord
from ....domain.repositories import AttendanceRepository, EmployeeRepository
from .directory_results import AttendanceResult, DirectoryError, DirectoryErrorCode


@dataclass(frozen=True)
class MarkAttendanceInput:
    employee_id: int
    day: date
    status: str


class MarkAttendanceUseCase:
    """R: Record one attendance mark."""

    def __init__(
        self, attendance: AttendanceRepository, employees: EmployeeRepository
    ) -> None:
        self._attendance = attendance
        self._employees = employees

    def execute(self, input_data: MarkAttendanceInput) -> AttendanceResult:
        status = input_data.status.strip()
        if not status:
            return AttendanceResult(
                error=DirectoryError(
                    code=DirectoryErrorCode.VALIDATION_ERROR,
                    message="Attendance status is required.",
                    resource="Attendance",
                )
            )

        if self._employees.get_employee(input_data.employee_id) is None:
            return AttendanceResult(
                error=DirectoryError(
                    code=DirectoryErrorCode.NOT_FOUND,
                    message=f"Employee {input_data.employee_id} not found.",
                    identifier=str(input_data.employee_id),
                )
            )

        record = self._attendance.create_attendance(
            employee_id=input_data.employee_id,
            day=input_data.day,
            status=status,
        )
        return AttendanceResult(record=record)


class ListAttendanceUseCase:
    def __init__(self, attendance: AttendanceRepository):
        self._attendance = attendance

    def execute(self) -> List[AttendanceRecord]:
        return self._attendance.list_attendance()
