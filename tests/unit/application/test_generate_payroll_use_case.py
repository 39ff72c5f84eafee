"""
Name: Generate Payroll Use Case Tests

Responsibilities:
  - One record per employee for the clock's month, net invariant intact
  - Re-running a generated period is refused and writes nothing
  - Zero employees, snapshot failures, partial runs and lost races
"""

import logging
from datetime import timedelta
from decimal import Decimal
from unittest.mock import Mock

import pytest

from paydesk.application.usecases.payroll import (
    GeneratePayrollUseCase,
    ListPayrollUseCase,
    PayrollErrorCode,
)
from paydesk.crosscutting.exceptions import DatabaseError, DuplicatePayrollRecordError
from paydesk.identity.access_gate import AccessContext
from paydesk.identity.users import UserRole

pytestmark = pytest.mark.unit

ACCESS = AccessContext(user_id=42, name="Admin", role=UserRole.ADMIN)


class FlakyLedger:
    """Delegates to a real ledger but fails the Nth insert."""

    def __init__(self, inner, fail_on_call: int):
        self._inner = inner
        self._fail_on_call = fail_on_call
        self.calls = 0

    def has_period(self, period):
        return self._inner.has_period(period)

    def save_record(self, record):
        self.calls += 1
        if self.calls == self._fail_on_call:
            raise DatabaseError("insert failed")
        return self._inner.save_record(record)


def _use_case(employee_repo, ledger, clock) -> GeneratePayrollUseCase:
    return GeneratePayrollUseCase(employees=employee_repo, ledger=ledger, clock=clock)


def test_generates_one_record_per_employee(
    employee_repo, payroll_repo, seeded_employees, clock
):
    result = _use_case(employee_repo, payroll_repo, clock).execute(ACCESS)

    assert result.error is None
    assert result.period == "2024-03"
    assert result.message == "Payroll generated for 2024-03"
    assert len(result.records) == len(seeded_employees)
    assert payroll_repo.count_records() == len(seeded_employees)

    for record in result.records:
        assert record.period == "2024-03"
        assert record.net_salary == (
            record.basic + record.hra + record.da - record.pf - record.tds
        )

    reference = next(r for r in result.records if r.employee_id == seeded_employees[0].id)
    assert reference.net_salary == Decimal("53500.00")


def test_rerun_same_period_is_refused(
    employee_repo, payroll_repo, seeded_employees, clock
):
    use_case = _use_case(employee_repo, payroll_repo, clock)
    assert use_case.execute(ACCESS).error is None

    second = use_case.execute(ACCESS)

    assert second.error.code == PayrollErrorCode.ALREADY_GENERATED
    assert second.records == []
    assert payroll_repo.count_records() == len(seeded_employees)


def test_next_month_generates_again(
    employee_repo, payroll_repo, seeded_employees, clock
):
    use_case = _use_case(employee_repo, payroll_repo, clock)
    use_case.execute(ACCESS)
    clock.advance(timedelta(days=31))

    result = use_case.execute(ACCESS)

    assert result.error is None
    assert result.period == "2024-04"
    assert payroll_repo.count_records() == 2 * len(seeded_employees)


def test_zero_employees_succeeds_with_no_records(employee_repo, payroll_repo, clock):
    result = _use_case(employee_repo, payroll_repo, clock).execute(ACCESS)

    assert result.error is None
    assert result.records == []
    assert result.message == "Payroll generated for 2024-03"


def test_snapshot_failure_writes_nothing(clock):
    employees = Mock()
    employees.list_employees.side_effect = DatabaseError("read failed")
    ledger = Mock()

    result = _use_case(employees, ledger, clock).execute(ACCESS)

    assert result.error.code == PayrollErrorCode.DATA_SOURCE_FAILURE
    ledger.save_record.assert_not_called()


def test_first_insert_storage_failure(employee_repo, payroll_repo, seeded_employees, clock):
    ledger = FlakyLedger(payroll_repo, fail_on_call=1)

    result = _use_case(employee_repo, ledger, clock).execute(ACCESS)

    assert result.error.code == PayrollErrorCode.DATA_SOURCE_FAILURE
    assert payroll_repo.count_records() == 0


def test_failure_after_first_insert_reports_partial_run(
    employee_repo, payroll_repo, seeded_employees, clock
):
    ledger = FlakyLedger(payroll_repo, fail_on_call=2)
    snapshot = employee_repo.list_employees()

    result = _use_case(employee_repo, ledger, clock).execute(ACCESS)

    assert result.error.code == PayrollErrorCode.PARTIAL_PAYROLL_RUN
    assert result.error.succeeded_employee_ids == (snapshot[0].id,)
    assert result.error.failed_employee_id == snapshot[1].id
    assert result.error.error_id
    assert "1 of 3" in result.error.message
    # earlier inserts are kept
    assert payroll_repo.count_records() == 1


def test_lost_race_on_first_insert_is_already_generated(
    employee_repo, seeded_employees, clock
):
    ledger = Mock()
    ledger.has_period.return_value = False
    ledger.save_record.side_effect = DuplicatePayrollRecordError("exists")

    result = _use_case(employee_repo, ledger, clock).execute(ACCESS)

    assert result.error.code == PayrollErrorCode.ALREADY_GENERATED
    assert ledger.save_record.call_count == 1


def test_list_payroll_includes_employee_names(
    employee_repo, payroll_repo, seeded_employees, clock
):
    _use_case(employee_repo, payroll_repo, clock).execute(ACCESS)

    records = ListPayrollUseCase(repository=payroll_repo).execute()

    assert {r.employee_name for r in records} == {"Asha", "Ravi", "Meera"}
    assert [r.id for r in records] == sorted((r.id for r in records), reverse=True)


def test_run_logs_who_triggered_it(
    employee_repo, payroll_repo, seeded_employees, clock, caplog
):
    with caplog.at_level(logging.INFO, logger="paydesk"):
        _use_case(employee_repo, payroll_repo, clock).execute(ACCESS)

    triggered = [getattr(r, "triggered_by", None) for r in caplog.records]
    assert 42 in triggered
