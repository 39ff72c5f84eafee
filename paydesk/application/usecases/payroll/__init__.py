from .generate_payroll import GeneratePayrollUseCase
from .list_payroll import ListPayrollUseCase
from .payroll_results import (
    GeneratePayrollResult,
    PayrollError,
    PayrollErrorCode,
)

__all__ = [
    "GeneratePayrollResult",
    "GeneratePayrollUseCase",
    "ListPayrollUseCase",
    "PayrollError",
    "PayrollErrorCode",
]
