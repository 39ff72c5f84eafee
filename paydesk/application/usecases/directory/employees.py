"""
Name: Employee Use Cases

Responsibilities:
  - List, create, update and delete employee master data

Collaborators:
  - domain.repositories.EmployeeRepository

Notes:
  - basic_salary sign is not checked; its magnitude is bounded by the HTTP schema
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import List

from ....domain.entities import Employee
from ....domain.repositories import EmployeeRepository
from .directory_results import (
    DeleteEmployeeResult,
    DirectoryError,
    DirectoryErrorCode,
    EmployeeResult,
)


@dataclass(frozen=True)
class EmployeeInput:
    name: str
    email: str
    department: str
    basic_salary: Decimal


def _validate(input_data: EmployeeInput) -> DirectoryError | None:
    if not input_data.name.strip():
        return DirectoryError(
            code=DirectoryErrorCode.VALIDATION_ERROR,
            message="Employee name is required.",
        )
    return None


def _not_found(employee_id: int) -> DirectoryError:
    return DirectoryError(
        code=DirectoryErrorCode.NOT_FOUND,
        message=f"Employee {employee_id} not found.",
        identifier=str(employee_id),
    )


class ListEmployeesUseCase:
    """R: All employees, newest first."""

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    def execute(self) -> List[Employee]:
        return self.repository.list_employees()


class CreateEmployeeUseCase:
    """R: Add an employee."""

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    def execute(self, input_data: EmployeeInput) -> EmployeeResult:
        error = _validate(input_data)
        if error is not None:
            return EmployeeResult(error=error)

        employee = self.repository.create_employee(
            name=input_data.name.strip(),
            email=input_data.email.strip(),
            department=input_data.department.strip(),
            basic_salary=input_data.basic_salary,
        )
        return EmployeeResult(employee=employee)


class UpdateEmployeeUseCase:
    """R: Replace an employee's fields."""

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    def execute(self, employee_id: int, input_data: EmployeeInput) -> EmployeeResult:
        error = _validate(input_data)
        if error is not None:
            return EmployeeResult(error=error)

        employee = self.repository.update_employee(
            employee_id,
            name=input_data.name.strip(),
            email=input_data.email.strip(),
            department=input_data.department.strip(),
            basic_salary=input_data.basic_salary,
        )
        if employee is None:
            return EmployeeResult(error=_not_found(employee_id))
        return EmployeeResult(employee=employee)


class DeleteEmployeeUseCase:
    """R: Remove an employee."""

    def __init__(self, repository: EmployeeRepository):
        self.repository = repository

    def execute(self, employee_id: int) -> DeleteEmployeeResult:
        if not self.repository.delete_employee(employee_id):
            return DeleteEmployeeResult(deleted=False, error=_not_found(employee_id))
        return DeleteEmployeeResult(deleted=True)
