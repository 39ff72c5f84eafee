"""
Name: Employee and Attendance Schemas

Responsibilities:
  - DTOs for employee CRUD and attendance marks
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal

from pydantic import BaseModel, Field

from .....domain.payroll import MAX_BASIC_SALARY


class EmployeeReq(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field(default="", max_length=320)
    department: str = Field(default="", max_length=200)
    basic_salary: Decimal = Field(
        ...,
        max_digits=12,
        decimal_places=2,
        ge=-MAX_BASIC_SALARY,
        le=MAX_BASIC_SALARY,
        description="Monthly basic salary",
    )


class EmployeeRes(BaseModel):
    id: int
    name: str
    email: str
    department: str
    basic_salary: Decimal
    created_at: dt.datetime | None = None


class DeleteEmployeeRes(BaseModel):
    deleted: bool


class AttendanceReq(BaseModel):
    employee_id: int
    date: dt.date
    status: str = Field(..., min_length=1, max_length=32)


class AttendanceRes(BaseModel):
    id: int
    employee_id: int
    employee_name: str | None = None
    date: dt.date
    status: str
    created_at: dt.datetime | None = None


class StatsRes(BaseModel):
    employees: int
    payrolls: int
    attendance: int
