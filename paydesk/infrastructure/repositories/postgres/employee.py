"""
Name: PostgreSQL Employee Repository

Responsibilities:
  - CRUD over the employees table
  - Snapshot of all employees for the payroll engine
"""

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

import psycopg

from ....domain.entities import Employee
from .base import PostgresRepository

_EMPLOYEE_COLUMNS = "id, name, email, department, basic_salary, created_at"


class PostgresEmployeeRepository(PostgresRepository):
    """R: PostgreSQL implementation of EmployeeRepository."""

    @staticmethod
    def _row_to_employee(row) -> Employee:
        return Employee(
            id=row[0],
            name=row[1],
            email=row[2],
            department=row[3],
            basic_salary=Decimal(row[4]),
            created_at=row[5],
        )

    def list_employees(self) -> List[Employee]:
        try:
            with self._get_pool().connection() as conn:
                rows = conn.execute(
                    f"SELECT {_EMPLOYEE_COLUMNS} FROM employees ORDER BY id DESC"
                ).fetchall()
        except psycopg.Error as exc:
            self._fail("Employee listing", exc)
        return [self._row_to_employee(row) for row in rows]

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute(
                    f"SELECT {_EMPLOYEE_COLUMNS} FROM employees WHERE id = %s",
                    (employee_id,),
                ).fetchone()
        except psycopg.Error as exc:
            self._fail("Employee lookup", exc)
        return self._row_to_employee(row) if row else None

    def create_employee(
        self, *, name: str, email: str, department: str, basic_salary: Decimal
    ) -> Employee:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute(
                    f"""
                    INSERT INTO employees (name, email, department, basic_salary)
                    VALUES (%s, %s, %s, %s)
                    RETURNING {_EMPLOYEE_COLUMNS}
                    """,
                    (name, email, department, basic_salary),
                ).fetchone()
        except psycopg.Error as exc:
            self._fail("Employee creation", exc)
        return self._row_to_employee(row)

    def update_employee(
        self,
        employee_id: int,
        *,
        name: str,
        email: str,
        department: str,
        basic_salary: Decimal,
    ) -> Optional[Employee]:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute(
                    f"""
                    UPDATE employees
                    SET name = %s, email = %s, department = %s, basic_salary = %s
                    WHERE id = %s
                    RETURNING {_EMPLOYEE_COLUMNS}
                    """,
                    (name, email, department, basic_salary, employee_id),
                ).fetchone()
        except psycopg.Error as exc:
            self._fail("Employee update", exc)
        return self._row_to_employee(row) if row else None

    def delete_employee(self, employee_id: int) -> bool:
        try:
            with self._get_pool().connection() as conn:
                cursor = conn.execute(
                    "DELETE FROM employees WHERE id = %s", (employee_id,)
                )
                deleted = cursor.rowcount > 0
        except psycopg.Error as exc:
            self._fail("Employee deletion", exc)
        return deleted

    def count_employees(self) -> int:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute("SELECT COUNT(*) FROM employees").fetchone()
        except psycopg.Error as exc:
            self._fail("Employee count", exc)
        return int(row[0])
