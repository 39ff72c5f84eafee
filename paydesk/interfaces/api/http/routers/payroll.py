"""
Name: Payroll Router

Responsibilities:
  - POST /payroll: run the payroll engine for the current period
  - GET /payroll: list the ledger newest first

Collaborators:
  - application.usecases.payroll
  - error_mapping.raise_payroll_error

Notes:
  - Every handler receives the caller's AccessContext explicitly
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from .....application.usecases.payroll import (
    GeneratePayrollUseCase,
    ListPayrollUseCase,
)
from .....container import get_generate_payroll_use_case, get_list_payroll_use_case
from .....domain.entities import PayrollRecord
from .....identity.access_gate import AccessContext
from ..dependencies import require_access
from ..error_mapping import raise_payroll_error
from ..schemas.payroll import GeneratePayrollRes, PayrollRecordRes

router = APIRouter(tags=["payroll"])


def _to_record_res(record: PayrollRecord) -> PayrollRecordRes:
    return PayrollRecordRes(
        id=record.id,
        employee_id=record.employee_id,
        employee_name=record.employee_name,
        period=record.period,
        basic=record.basic,
        hra=record.hra,
        da=record.da,
        pf=record.pf,
        tds=record.tds,
        net_salary=record.net_salary,
        created_at=record.created_at,
    )


@router.post(
    "/payroll",
    response_model=GeneratePayrollRes,
    status_code=status.HTTP_201_CREATED,
)
def generate_payroll(
    access: AccessContext = Depends(require_access),
    use_case: GeneratePayrollUseCase = Depends(get_generate_payroll_use_case),
) -> GeneratePayrollRes:
    result = use_case.execute(access)
    if result.error is not None:
        raise_payroll_error(result.period, result.error)
    return GeneratePayrollRes(
        message=result.message,
        period=result.period,
        records=len(result.records),
    )


@router.get("/payroll", response_model=List[PayrollRecordRes])
def list_payroll(
    access: AccessContext = Depends(require_access),
    use_case: ListPayrollUseCase = Depends(get_list_payroll_use_case),
) -> List[PayrollRecordRes]:
    return [_to_record_res(record) for record in use_case.execute()]
