"""
Name: Employee Directory Router

Responsibilities:
  - Employee CRUD (/employees)
  - Attendance marks (/attendance)
  - Dashboard counts (/stats)

Notes:
  - Every handler receives the caller's AccessContext explicitly; no role checks
"""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, status

from .....application.usecases.directory import (
    CreateEmployeeUseCase,
    DeleteEmployeeUseCase,
    EmployeeInput,
    GetStatsUseCase,
    ListAttendanceUseCase,
    ListEmployeesUseCase,
    MarkAttendanceInput,
    MarkAttendanceUseCase,
    UpdateEmployeeUseCase,
)
from .....container import (
    get_create_employee_use_case,
    get_delete_employee_use_case,
    get_list_attendance_use_case,
    get_list_employees_use_case,
    get_mark_attendance_use_case,
    get_stats_use_case,
    get_update_employee_use_case,
)
from .....domain.entities import AttendanceRecord, Employee
from .....identity.access_gate import AccessContext
from ..dependencies import require_access
from ..error_mapping import raise_directory_error
from ..schemas.employees import (
    AttendanceReq,
    AttendanceRes,
    DeleteEmployeeRes,
    EmployeeReq,
    EmployeeRes,
    StatsRes,
)

router = APIRouter(tags=["directory"])


def _to_employee_res(employee: Employee) -> EmployeeRes:
    return EmployeeRes(
        id=employee.id,
        name=employee.name,
        email=employee.email,
        department=employee.department,
        basic_salary=employee.basic_salary,
        created_at=employee.created_at,
    )


def _to_attendance_res(record: AttendanceRecord) -> AttendanceRes:
    return AttendanceRes(
        id=record.id,
        employee_id=record.employee_id,
        employee_name=record.employee_name,
        date=record.date,
        status=record.status,
        created_at=record.created_at,
    )


def _to_input(req: EmployeeReq) -> EmployeeInput:
    return EmployeeInput(
        name=req.name,
        email=req.email,
        department=req.department,
        basic_salary=req.basic_salary,
    )


# -----------------------------------------------------------------------------
# Employees
# -----------------------------------------------------------------------------
@router.get("/employees", response_model=List[EmployeeRes])
def list_employees(
    access: AccessContext = Depends(require_access),
    use_case: ListEmployeesUseCase = Depends(get_list_employees_use_case),
) -> List[EmployeeRes]:
    return [_to_employee_res(employee) for employee in use_case.execute()]


@router.post(
    "/employees", response_model=EmployeeRes, status_code=status.HTTP_201_CREATED
)
def create_employee(
    req: EmployeeReq,
    access: AccessContext = Depends(require_access),
    use_case: CreateEmployeeUseCase = Depends(get_create_employee_use_case),
) -> EmployeeRes:
    result = use_case.execute(_to_input(req))
    if result.error is not None:
        raise_directory_error(result.error)
    return _to_employee_res(result.employee)


@router.put("/employees/{employee_id}", response_model=EmployeeRes)
def update_employee(
    employee_id: int,
    req: EmployeeReq,
    access: AccessContext = Depends(require_access),
    use_case: UpdateEmployeeUseCase = Depends(get_update_employee_use_case),
) -> EmployeeRes:
    result = use_case.execute(employee_id, _to_input(req))
    if result.error is not None:
        raise_directory_error(result.error)
    return _to_employee_res(result.employee)


@router.delete("/employees/{employee_id}", response_model=DeleteEmployeeRes)
def delete_employee(
    employee_id: int,
    access: AccessContext = Depends(require_access),
    use_case: DeleteEmployeeUseCase = Depends(get_delete_employee_use_case),
) -> DeleteEmployeeRes:
    result = use_case.execute(employee_id)
    if result.error is not None:
        raise_directory_error(result.error)
    return DeleteEmployeeRes(deleted=result.deleted)


# -----------------------------------------------------------------------------
# Attendance
# -----------------------------------------------------------------------------
@router.get("/attendance", response_model=List[AttendanceRes])
def list_attendance(
    access: AccessContext = Depends(require_access),
    use_case: ListAttendanceUseCase = Depends(get_list_attendance_use_case),
) -> List[AttendanceRes]:
    return [_to_attendance_res(record) for record in use_case.execute()]


@router.post(
    "/attendance", response_model=AttendanceRes, status_code=status.HTTP_201_CREATED
)
def mark_attendance(
    req: AttendanceReq,
    access: AccessContext = Depends(require_access),
    use_case: MarkAttendanceUseCase = Depends(get_mark_attendance_use_case),
) -> AttendanceRes:
    result = use_case.execute(
        MarkAttendanceInput(employee_id=req.employee_id, day=req.date, status=req.status)
    )
    if result.error is not None:
        raise_directory_error(result.error)
    return _to_attendance_res(result.record)


# -----------------------------------------------------------------------------
# Stats
# -----------------------------------------------------------------------------
@router.get("/stats", response_model=StatsRes)
def get_stats(
    access: AccessContext = Depends(require_access),
    use_case: GetStatsUseCase = Depends(get_stats_use_case),
) -> StatsRes:
    stats = use_case.execute()
    return StatsRes(
        employees=stats.employees,
        payrolls=stats.payrolls,
        attendance=stats.attendance,
    )
