"""
Name: Payroll Use Case Results

Responsibilities:
  - Stable error codes for payroll runs
  - Typed run result carrying the period and the persisted records
  - Enough detail on partial runs for manual reconciliation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ....domain.entities import PayrollRecord


class PayrollErrorCode(str, Enum):
    ALREADY_GENERATED = "ALREADY_GENERATED"
    PARTIAL_PAYROLL_RUN = "PARTIAL_PAYROLL_RUN"
    DATA_SOURCE_FAILURE = "DATA_SOURCE_FAILURE"


@dataclass(frozen=True)
class PayrollError:
    """
    Run failure.

    For PARTIAL_PAYROLL_RUN, succeeded_employee_ids lists the employees whose
    records were persisted before failed_employee_id could not be written.
    """

    code: PayrollErrorCode
    message: str
    error_id: str | None = None
    succeeded_employee_ids: tuple[int, ...] = ()
    failed_employee_id: int | None = None


@dataclass
class GeneratePayrollResult:
    period: str
    records: List[PayrollRecord] = field(default_factory=list)
    error: PayrollError | None = None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return f"Payroll generated for {self.period}"
