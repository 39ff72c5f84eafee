"""
Name: List Payroll Use Case

Responsibilities:
  - Return every payroll record newest first, with the employee name
"""

from typing import List

from ....domain.entities import PayrollRecord
from ....domain.repositories import PayrollRepository


class ListPayrollUseCase:
    """R: Read the payroll ledger."""

    def __init__(self, repository: PayrollRepository):
        self.repository = repository

    def execute(self) -> List[PayrollRecord]:
        return self.repository.list_records()
