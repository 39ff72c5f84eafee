"""
Name: Dashboard Stats Use Case

Responsibilities:
  - Count employees, payroll records and attendance marks
"""

from dataclasses import dataclass

from ....domain.repositories import (
    AttendanceRepository,
    EmployeeRepository,
    PayrollRepository,
)


@dataclass(frozen=True)
class DashboardStats:
    employees: int
    payrolls: int
    attendance: int


class GetStatsUseCase:
    def __init__(
        self,
        employees: EmployeeRepository,
        payroll: PayrollRepository,
        attendance: AttendanceRepository,
    ) -> None:
        self._employees = employees
        self._payroll = payroll
        self._attendance = attendance

    def execute(self) -> DashboardStats:
        return DashboardStats(
            employees=self._employees.count_employees(),
            payrolls=self._payroll.count_records(),
            attendance=self._attendance.count_attendance(),
        )
