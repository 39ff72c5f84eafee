"""
Name: Domain Entities

Responsibilities:
  - Define the records the payroll core reads and writes
    (Employee, AttendanceRecord, PayrollRecord)
  - Provide type safety for the domain layer

Collaborators:
  - None (pure domain layer, no external dependencies)

Constraints:
  - No dependencies on infrastructure or frameworks
  - Money is Decimal, never float

Notes:
  - Employee and AttendanceRecord are owned by the directory CRUD
  - PayrollRecord is identified by (employee_id, period)
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional


@dataclass
class Employee:
    """
    R: Employee master data read by the payroll engine.

    Attributes:
        id: Storage-assigned numeric id
        name: Display name
        email: Contact email (not a login identity)
        department: Free-text department name
        basic_salary: Monthly basic salary (may be zero or negative; not validated)
        created_at: Creation timestamp
    """

    id: int
    name: str
    email: str
    department: str
    basic_salary: Decimal
    created_at: Optional[datetime] = None


@dataclass
class AttendanceRecord:
    """R: One attendance mark for an employee on a date."""

    id: int
    employee_id: int
    date: date
    status: str
    employee_name: Optional[str] = None
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class PayrollRecord:
    """
    R: One payroll line for an employee in a period.

    Invariant:
        net_salary == basic + hra + da - pf - tds

    Attributes:
        employee_id: Employee the line belongs to
        period: Calendar year-month label (YYYY-MM)
        basic, hra, da, pf, tds, net_salary: Decimal amounts
        id: Storage id (None before persistence)
        employee_name: Filled in by listings (join)
    """

    employee_id: int
    period: str
    basic: Decimal
    hra: Decimal
    da: Decimal
    pf: Decimal
    tds: Decimal
    net_salary: Decimal
    id: Optional[int] = None
    employee_name: Optional[str] = None
    created_at: Optional[datetime] = None
