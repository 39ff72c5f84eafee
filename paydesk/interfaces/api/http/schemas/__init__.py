from .auth import LoginReq, LoginRes, MeRes, RegisterReq, RegisterRes, UserRes
from .employees import (
    AttendanceReq,
    AttendanceRes,
    DeleteEmployeeRes,
    EmployeeReq,
    EmployeeRes,
    StatsRes,
)
from .payroll import GeneratePayrollRes, PayrollRecordRes

__all__ = [
    "AttendanceReq",
    "AttendanceRes",
    "DeleteEmployeeRes",
    "EmployeeReq",
    "EmployeeRes",
    "GeneratePayrollRes",
    "LoginReq",
    "LoginRes",
    "MeRes",
    "PayrollRecordRes",
    "RegisterReq",
    "RegisterRes",
    "StatsRes",
    "UserRes",
]
