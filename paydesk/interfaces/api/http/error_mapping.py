"""
Name: Use Case Error -> HTTP (RFC 7807)

Responsibilities:
  - Translate typed use-case errors into AppHTTPException
  - Keep the mapping in one place so routers stay thin

Rules:
  - Storage details never reach the client; only the code and error_id
  - Unknown codes fall back to INTERNAL_ERROR
"""

from __future__ import annotations

from typing import NoReturn

from ....application.usecases.auth import AuthError, AuthErrorCode
from ....application.usecases.directory import DirectoryError, DirectoryErrorCode
from ....application.usecases.payroll import PayrollError, PayrollErrorCode
from ....crosscutting.error_responses import (
    already_generated,
    data_source_failure,
    duplicate_identity,
    internal_error,
    not_found,
    partial_payroll_run,
    user_not_found,
    validation_error,
    wrong_password,
)


def raise_auth_error(error: AuthError) -> NoReturn:
    if error.code == AuthErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message)
    if error.code == AuthErrorCode.DUPLICATE_IDENTITY:
        raise duplicate_identity(error.message)
    if error.code == AuthErrorCode.USER_NOT_FOUND:
        raise user_not_found(error.message)
    if error.code == AuthErrorCode.WRONG_PASSWORD:
        raise wrong_password(error.message)
    if error.code == AuthErrorCode.DATA_SOURCE_FAILURE:
        raise data_source_failure(error.message, error_id=error.error_id)
    raise internal_error(error.message)


def raise_payroll_error(period: str, error: PayrollError) -> NoReturn:
    """
    Translate PayrollErrorCode -> HTTP.

    PARTIAL_PAYROLL_RUN carries the employees already paid so an operator can
    reconcile the period by hand.
    """
    if error.code == PayrollErrorCode.ALREADY_GENERATED:
        raise already_generated(period)
    if error.code == PayrollErrorCode.PARTIAL_PAYROLL_RUN:
        raise partial_payroll_run(
            error.message,
            errors=[
                {
                    "period": period,
                    "succeeded_employee_ids": list(error.succeeded_employee_ids),
                    "failed_employee_id": error.failed_employee_id,
                    "error_id": error.error_id,
                }
            ],
        )
    if error.code == PayrollErrorCode.DATA_SOURCE_FAILURE:
        raise data_source_failure(error.message, error_id=error.error_id)
    raise internal_error(error.message)


def raise_directory_error(error: DirectoryError) -> NoReturn:
    if error.code == DirectoryErrorCode.VALIDATION_ERROR:
        raise validation_error(error.message)
    if error.code == DirectoryErrorCode.NOT_FOUND:
        raise not_found(error.resource, error.identifier or "-")
    raise internal_error(error.message)
