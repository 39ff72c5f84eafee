"""
Name: In-Memory Employee Repository

Responsibilities:
  - Employee CRUD over a dict (tests / local dev)
  - Newest-first ordering aligned with the Postgres repository (id DESC)
  - Cascade deletes to dependent tables through registered listeners,
    like ON DELETE CASCADE
"""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from decimal import Decimal
from threading import Lock
from typing import Callable, Dict, List, Optional

from ....domain.entities import Employee


class InMemoryEmployeeRepository:
    """Thread-safe in-memory employee table."""

    def __init__(self) -> None:
        self._lock = Lock()
        self._employees: Dict[int, Employee] = {}
        self._next_id = 1
        self._delete_listeners: List[Callable[[int], None]] = []

    def on_delete(self, listener: Callable[[int], None]) -> None:
        """Register `listener(employee_id)` to run after an employee is deleted."""
        self._delete_listeners.append(listener)

    def ping(self) -> bool:
        return True

    def list_employees(self) -> List[Employee]:
        with self._lock:
            return [
                replace(self._employees[key])
                for key in sorted(self._employees, reverse=True)
            ]

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        with self._lock:
            employee = self._employees.get(employee_id)
            return replace(employee) if employee else None

    def create_employee(
        self, *, name: str, email: str, department: str, basic_salary: Decimal
    ) -> Employee:
        with self._lock:
            employee = Employee(
                id=self._next_id,
                name=name,
                email=email,
                department=department,
                basic_salary=Decimal(basic_salary),
                created_at=datetime.now(timezone.utc),
            )
            self._employees[employee.id] = employee
            self._next_id += 1
            return replace(employee)

    def update_employee(
        self,
        employee_id: int,
        *,
        name: str,
        email: str,
        department: str,
        basic_salary: Decimal,
    ) -> Optional[Employee]:
        with self._lock:
            current = self._employees.get(employee_id)
            if current is None:
                return None
            updated = replace(
                current,
                name=name,
                email=email,
                department=department,
                basic_salary=Decimal(basic_salary),
            )
            self._employees[employee_id] = updated
            return replace(updated)

    def delete_employee(self, employee_id: int) -> bool:
        with self._lock:
            deleted = self._employees.pop(employee_id, None) is not None
        if deleted:
            for listener in self._delete_listeners:
                listener(employee_id)
        return deleted

    def count_employees(self) -> int:
        with self._lock:
            return len(self._employees)
