"""
Name: Payroll Schemas

Responsibilities:
  - DTOs for payroll records and run results
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel


class PayrollRecordRes(BaseModel):
    id: int | None = None
    employee_id: int
    employee_name: str | None = None
    period: str
    basic: Decimal
    hra: Decimal
    da: Decimal
    pf: Decimal
    tds: Decimal
    net_salary: Decimal
    created_at: datetime | None = None


class GeneratePayrollRes(BaseModel):
    message: str
    period: str
    records: int
