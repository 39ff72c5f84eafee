"""
Name: In-Memory Payroll Repository (Payroll Ledger)

Responsibilities:
  - Store payroll records keyed by (employee_id, period)
  - Reject duplicates with DuplicatePayrollRecordError, like the UNIQUE
    constraint in the payroll table
  - Drop an employee's records when the employee is deleted

Constraints:
  - Thread-safe: every access under a Lock
  - Records are never mutated once stored
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, List, Tuple

from ....crosscutting.exceptions import DuplicatePayrollRecordError
from ....domain.entities import PayrollRecord
from .employee import InMemoryEmployeeRepository


class InMemoryPayrollRepository:
    def __init__(self, employees: InMemoryEmployeeRepository) -> None:
        self._lock = Lock()
        self._employees = employees
        self._records: Dict[Tuple[int, str], PayrollRecord] = {}
        self._next_id = 1
        employees.on_delete(self._purge_employee)

    def _purge_employee(self, employee_id: int) -> None:
        with self._lock:
            for key in [key for key in self._records if key[0] == employee_id]:
                del self._records[key]

    def has_period(self, period: str) -> bool:
        with self._lock:
            return any(key[1] == period for key in self._records)

    def save_record(self, record: PayrollRecord) -> PayrollRecord:
        key = (record.employee_id, record.period)
        with self._lock:
            if key in self._records:
                raise DuplicatePayrollRecordError(
                    f"Payroll record exists for employee {record.employee_id} "
                    f"in {record.period}"
                )
            stored = replace(
                record, id=self._next_id, created_at=datetime.now(timezone.utc)
            )
            self._records[key] = stored
            self._next_id += 1
            return stored

    def list_records(self) -> List[PayrollRecord]:
        with self._lock:
            records = sorted(
                self._records.values(), key=lambda item: item.id or 0, reverse=True
            )

        listed: List[PayrollRecord] = []
        for record in records:
            employee = self._employees.get_employee(record.employee_id)
            if employee is None:
                continue
            listed.append(replace(record, employee_name=employee.name))
        return listed

    def count_records(self) -> int:
        with self._lock:
            return len(self._records)
