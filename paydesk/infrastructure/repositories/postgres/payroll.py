"""
Name: PostgreSQL Payroll Repository (Payroll Ledger)

Responsibilities:
  - Insert payroll records, one transaction per record
  - Report (employee_id, period) collisions as DuplicatePayrollRecordError
  - List records joined with the employee name

Constraints:
  - UNIQUE (employee_id, period) lives in the schema (see alembic 001)
"""

from __future__ import annotations

from typing import List

import psycopg
from psycopg import errors as pg_errors

from ....crosscutting.exceptions import DuplicatePayrollRecordError
from ....domain.entities import PayrollRecord
from .base import PostgresRepository

_PAYROLL_COLUMNS = "id, employee_id, period, basic, hra, da, pf, tds, net_salary, created_at"


class PostgresPayrollRepository(PostgresRepository):
    """R: PostgreSQL implementation of PayrollRepository."""

    @staticmethod
    def _row_to_record(row, employee_name: str | None = None) -> PayrollRecord:
        return PayrollRecord(
            id=row[0],
            employee_id=row[1],
            period=row[2],
            basic=row[3],
            hra=row[4],
            da=row[5],
            pf=row[6],
            tds=row[7],
            net_salary=row[8],
            created_at=row[9],
            employee_name=employee_name,
        )

    def has_period(self, period: str) -> bool:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute(
                    "SELECT EXISTS (SELECT 1 FROM payroll WHERE period = %s)",
                    (period,),
                ).fetchone()
        except psycopg.Error as exc:
            self._fail("Payroll period lookup", exc)
        return bool(row[0])

    def save_record(self, record: PayrollRecord) -> PayrollRecord:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute(
                    f"""
                    INSERT INTO payroll
                        (employee_id, period, basic, hra, da, pf, tds, net_salary)
                    VALUES (%s, %s, %s, %s, %s, %s, %s, %s)
                    RETURNING {_PAYROLL_COLUMNS}
                    """,
                    (
                        record.employee_id,
                        record.period,
                        record.basic,
                        record.hra,
                        record.da,
                        record.pf,
                        record.tds,
                        record.net_salary,
                    ),
                ).fetchone()
        except pg_errors.UniqueViolation as exc:
            raise DuplicatePayrollRecordError(
                f"Payroll record exists for employee {record.employee_id} "
                f"in {record.period}"
            ) from exc
        except psycopg.Error as exc:
            self._fail("Payroll insert", exc)
        return self._row_to_record(row)

    def list_records(self) -> List[PayrollRecord]:
        try:
            with self._get_pool().connection() as conn:
                rows = conn.execute(
                    """
                    SELECT p.id, p.employee_id, p.period, p.basic, p.hra, p.da,
                           p.pf, p.tds, p.net_salary, p.created_at, e.name
                    FROM payroll p
                    JOIN employees e ON p.employee_id = e.id
                    ORDER BY p.id DESC
                    """
                ).fetchall()
        except psycopg.Error as exc:
            self._fail("Payroll listing", exc)
        return [self._row_to_record(row[:10], employee_name=row[10]) for row in rows]

    def count_records(self) -> int:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute("SELECT COUNT(*) FROM payroll").fetchone()
        except psycopg.Error as exc:
            self._fail("Payroll count", exc)
        return int(row[0])
