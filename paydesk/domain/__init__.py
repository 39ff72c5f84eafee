"""Domain layer: entities, repository contracts and payroll calculation."""

from .entities import AttendanceRecord, Employee, PayrollRecord
from .payroll import compute_payroll_record, period_label

__all__ = [
    "AttendanceRecord",
    "Employee",
    "PayrollRecord",
    "compute_payroll_record",
    "period_label",
]
