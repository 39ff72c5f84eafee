"""
Name: Typed Backend Exceptions (internal errors)

Responsibilities:
  - Give internal errors a stable error_code
  - Generate error_id for log correlation
  - Carry a human message without leaking storage internals

Collaborators:
  - infrastructure/repositories: raise these on storage failures
  - application/usecases: classify them into result error codes
  - api/exception_handlers.py: maps the unclassified ones to HTTP
"""

from __future__ import annotations

from uuid import uuid4


class PaydeskError(Exception):
    """R: Base for internal errors (error_code + error_id + message)."""

    error_code: str = "PAYDESK_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)


class DatabaseError(PaydeskError):
    """Storage unreachable, query failure, timeout, pool."""

    error_code: str = "DATA_SOURCE_FAILURE"


class DuplicateIdentityError(PaydeskError):
    """A user with the same email already exists."""

    error_code: str = "DUPLICATE_IDENTITY"


class DuplicatePayrollRecordError(PaydeskError):
    """A payroll record for (employee, period) already exists."""

    error_code: str = "ALREADY_GENERATED"
