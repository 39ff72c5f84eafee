"""
Name: In-Memory Attendance Repository

Responsibilities:
  - Store attendance marks (tests / local dev)
  - Resolve employee names on listing, like the Postgres JOIN
  - Drop an employee's marks when the employee is deleted
"""

from __future__ import annotations

from dataclasses import replace
from datetime import date, datetime, timezone
from threading import Lock
from typing import List

from ....domain.entities import AttendanceRecord
from .employee import InMemoryEmployeeRepository


class InMemoryAttendanceRepository:
    def __init__(self, employees: InMemoryEmployeeRepository) -> None:
        self._lock = Lock()
        self._employees = employees
        self._records: List[AttendanceRecord] = []
        self._next_id = 1
        employees.on_delete(self._purge_employee)

    def _purge_employee(self, employee_id: int) -> None:
        with self._lock:
            self._records = [
                record for record in self._records if record.employee_id != employee_id
            ]

    def create_attendance(
        self, *, employee_id: int, day: date, status: str
    ) -> AttendanceRecord:
        with self._lock:
            record = AttendanceRecord(
                id=self._next_id,
                employee_id=employee_id,
                date=day,
                status=status,
                created_at=datetime.now(timezone.utc),
            )
            self._records.append(record)
            self._next_id += 1
            return replace(record)

    def list_attendance(self) -> List[AttendanceRecord]:
        with self._lock:
            records = list(reversed(self._records))

        listed: List[AttendanceRecord] = []
        for record in records:
            employee = self._employees.get_employee(record.employee_id)
            if employee is None:
                continue
            listed.append(replace(record, employee_name=employee.name))
        return listed

    def count_attendance(self) -> int:
        with self._lock:
            return len(self._records)
