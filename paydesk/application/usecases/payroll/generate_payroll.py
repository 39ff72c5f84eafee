"""
Name: Generate Payroll Use Case

Business Goal:
    Produce one payroll record per employee for the current calendar month.

Phases:
    1. Snapshot: read every employee (no filtering). A read failure aborts
       before any write.
    2. Guard: if the ledger already holds records for the period, stop with
       ALREADY_GENERATED.
    3. Compute: pure Decimal arithmetic (domain.payroll).
    4. Persist: one insert per employee, each in its own transaction.

Failure semantics:
    - A duplicate (employee, period) on the first insert means a concurrent
      run won the race: ALREADY_GENERATED, nothing written by this run.
    - Any insert failure after at least one success: PARTIAL_PAYROLL_RUN with
      the succeeded employee ids. Earlier inserts are not rolled back.
    - Storage failure on the first insert: DATA_SOURCE_FAILURE.

Collaborators:
    - domain.repositories.EmployeeRepository (snapshot)
    - domain.repositories.PayrollRepository (guard + persist)
    - domain.payroll.compute_payroll_record / period_label
    - identity.access_gate.AccessContext (who triggered the run)
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, List

from ....crosscutting.exceptions import DatabaseError, DuplicatePayrollRecordError
from ....crosscutting.logger import logger
from ....crosscutting.metrics import record_payroll_run
from ....domain.entities import PayrollRecord
from ....domain.payroll import compute_payroll_record, period_label
from ....domain.repositories import EmployeeRepository, PayrollRepository
from ....identity.access_gate import AccessContext
from .payroll_results import GeneratePayrollResult, PayrollError, PayrollErrorCode


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class GeneratePayrollUseCase:
    """R: Compute and persist the payroll for the current period."""

    def __init__(
        self,
        employees: EmployeeRepository,
        ledger: PayrollRepository,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._employees = employees
        self._ledger = ledger
        self._clock = clock

    def execute(self, access: AccessContext) -> GeneratePayrollResult:
        period = period_label(self._clock())
        logger.info(
            "Payroll run requested",
            extra={"period": period, "triggered_by": access.user_id},
        )

        # 1) Snapshot
        try:
            employees = self._employees.list_employees()
            already_generated = self._ledger.has_period(period)
        except DatabaseError as exc:
            return self._data_source_failure(period, exc)

        # 2) Guard
        if already_generated:
            logger.info("Payroll run skipped: already generated", extra={"period": period})
            record_payroll_run("already_generated")
            return self._already_generated(period)

        # 3) Compute
        lines = [
            compute_payroll_record(employee.id, employee.basic_salary, period)
            for employee in employees
        ]

        # 4) Persist
        saved: List[PayrollRecord] = []
        for line in lines:
            try:
                saved.append(self._ledger.save_record(line))
            except (DuplicatePayrollRecordError, DatabaseError) as exc:
                return self._persist_failure(period, saved, line, len(lines), exc)

        logger.info(
            "Payroll generated",
            extra={
                "period": period,
                "records": len(saved),
                "triggered_by": access.user_id,
            },
        )
        record_payroll_run("success", len(saved))
        return GeneratePayrollResult(period=period, records=saved)

    # -----------------------------------------------------------------
    # Failure helpers
    # -----------------------------------------------------------------
    def _persist_failure(
        self,
        period: str,
        saved: List[PayrollRecord],
        failed: PayrollRecord,
        total: int,
        exc: Exception,
    ) -> GeneratePayrollResult:
        if not saved:
            if isinstance(exc, DuplicatePayrollRecordError):
                logger.warning(
                    "Payroll run lost race: period already generated",
                    extra={"period": period},
                )
                record_payroll_run("already_generated")
                return self._already_generated(period)
            return self._data_source_failure(period, exc)

        succeeded = tuple(record.employee_id for record in saved)
        error_id = getattr(exc, "error_id", None)
        logger.error(
            "Payroll run partially persisted",
            extra={
                "period": period,
                "error_id": error_id,
                "succeeded_employee_ids": list(succeeded),
                "failed_employee_id": failed.employee_id,
            },
        )
        record_payroll_run("partial", len(saved))
        return GeneratePayrollResult(
            period=period,
            records=saved,
            error=PayrollError(
                code=PayrollErrorCode.PARTIAL_PAYROLL_RUN,
                message=(
                    f"Payroll for {period} partially generated: "
                    f"{len(saved)} of {total} records written"
                ),
                error_id=error_id,
                succeeded_employee_ids=succeeded,
                failed_employee_id=failed.employee_id,
            ),
        )

    @staticmethod
    def _already_generated(period: str) -> GeneratePayrollResult:
        return GeneratePayrollResult(
            period=period,
            error=PayrollError(
                code=PayrollErrorCode.ALREADY_GENERATED,
                message=f"Payroll already generated for {period}",
            ),
        )

    @staticmethod
    def _data_source_failure(period: str, exc: Exception) -> GeneratePayrollResult:
        error_id = getattr(exc, "error_id", None)
        logger.error(
            "Payroll run aborted: data source error",
            extra={"period": period, "error_id": error_id},
        )
        record_payroll_run("data_source_failure")
        return GeneratePayrollResult(
            period=period,
            error=PayrollError(
                code=PayrollErrorCode.DATA_SOURCE_FAILURE,
                message="Payroll data source unavailable",
                error_id=error_id,
            ),
        )
