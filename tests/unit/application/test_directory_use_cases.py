"""
Name: Directory Use Case Tests

Responsibilities:
  - Employee CRUD with NOT_FOUND on missing ids
  - Attendance marks require an existing employee
  - Dashboard counts
"""

from datetime import date
from decimal import Decimal

import pytest

from paydesk.application.usecases.directory import (
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    DirectoryErrorCode,
    EmployeeInput,
    GetStatsUseCase,
    ListAttendanceUseCase,
    ListEmployeesUseCase,
    MarkAttendanceInput,
    MarkAttendanceUseCase,
    UpdateEmployeeUseCase,
)

pytestmark = pytest.mark.unit


def _input(name="Kiran", salary="42000") -> EmployeeInput:
    return EmployeeInput(
        name=name,
        email="kiran@example.com",
        department="Finance",
        basic_salary=Decimal(salary),
    )


def test_create_and_list_newest_first(employee_repo):
    create = CreateEmployeeUseCase(employee_repo)
    first = create.execute(_input("First")).employee
    second = create.execute(_input("Second")).employee

    listed = ListEmployeesUseCase(employee_repo).execute()

    assert [e.id for e in listed] == [second.id, first.id]


def test_create_rejects_blank_name(employee_repo):
    result = CreateEmployeeUseCase(employee_repo).execute(_input(name="  "))

    assert result.error.code == DirectoryErrorCode.VALIDATION_ERROR
    assert employee_repo.count_employees() == 0


def test_update_existing_employee(employee_repo, seeded_employees):
    target = seeded_employees[1]

    result = UpdateEmployeeUseCase(employee_repo).execute(
        target.id, _input(name="Ravi K", salary="15000")
    )

    assert result.error is None
    assert result.employee.name == "Ravi K"
    assert employee_repo.get_employee(target.id).basic_salary == Decimal("15000")


def test_update_missing_employee_is_not_found(employee_repo):
    result = UpdateEmployeeUseCase(employee_repo).execute(999, _input())

    assert result.error.code == DirectoryErrorCode.NOT_FOUND
    assert result.error.identifier == "999"


def test_delete_employee(employee_repo, seeded_employees):
    use_case = DeleteEmployeeUseCase(employee_repo)

    assert use_case.execute(seeded_employees[0].id).deleted is True
    missing = use_case.execute(seeded_employees[0].id)
    assert missing.deleted is False
    assert missing.error.code == DirectoryErrorCode.NOT_FOUND


def test_mark_attendance_for_existing_employee(
    attendance_repo, employee_repo, seeded_employees
):
    result = MarkAttendanceUseCase(attendance_repo, employee_repo).execute(
        MarkAttendanceInput(
            employee_id=seeded_employees[0].id, day=date(2024, 3, 1), status="present"
        )
    )

    assert result.error is None
    listed = ListAttendanceUseCase(attendance_repo).execute()
    assert listed[0].employee_name == "Asha"
    assert listed[0].status == "present"


def test_mark_attendance_for_unknown_employee(attendance_repo, employee_repo):
    result = MarkAttendanceUseCase(attendance_repo, employee_repo).execute(
        MarkAttendanceInput(employee_id=42, day=date(2024, 3, 1), status="present")
    )

    assert result.error.code == DirectoryErrorCode.NOT_FOUND
    assert attendance_repo.count_attendance() == 0


def test_stats_counts(employee_repo, payroll_repo, attendance_repo, seeded_employees):
    MarkAttendanceUseCase(attendance_repo, employee_repo).execute(
        MarkAttendanceInput(
            employee_id=seeded_employees[0].id, day=date(2024, 3, 1), status="present"
        )
    )

    stats = GetStatsUseCase(employee_repo, payroll_repo, attendance_repo).execute()

    assert (stats.employees, stats.payrolls, stats.attendance) == (3, 0, 1)
