"""
Name: PostgreSQL Attendance Repository

Responsibilities:
  - Insert attendance marks
  - List marks joined with the employee name
"""

from __future__ import annotations

from datetime import date
from typing import List

import psycopg

from ....domain.entities import AttendanceRecord
from .base import PostgresRepository


class PostgresAttendanceRepository(PostgresRepository):
    """R: PostgreSQL implementation of AttendanceRepository."""

    def create_attendance(
        self, *, employee_id: int, day: date, status: str
    ) -> AttendanceRecord:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute(
                    """
                    INSERT INTO attendance (employee_id, date, status)
                    VALUES (%s, %s, %s)
                    RETURNING id, employee_id, date, status, created_at
                    """,
                    (employee_id, day, status),
                ).fetchone()
        except psycopg.Error as exc:
            self._fail("Attendance creation", exc)

        return AttendanceRecord(
            id=row[0],
            employee_id=row[1],
            date=row[2],
            status=row[3],
            created_at=row[4],
        )

    def list_attendance(self) -> List[AttendanceRecord]:
        try:
            with self._get_pool().connection() as conn:
                rows = conn.execute(
                    """
                    SELECT a.id, a.employee_id, a.date, a.status, a.created_at, e.name
                    FROM attendance a
                    JOIN employees e ON a.employee_id = e.id
                    ORDER BY a.id DESC
                    """
                ).fetchall()
        except psycopg.Error as exc:
            self._fail("Attendance listing", exc)

        return [
            AttendanceRecord(
                id=row[0],
                employee_id=row[1],
                date=row[2],
                status=row[3],
                created_at=row[4],
                employee_name=row[5],
            )
            for row in rows
        ]

    def count_attendance(self) -> int:
        try:
            with self._get_pool().connection() as conn:
                row = conn.execute("SELECT COUNT(*) FROM attendance").fetchone()
        except psycopg.Error as exc:
            self._fail("Attendance count", exc)
        return int(row[0])
