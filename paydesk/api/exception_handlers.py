"""
Name: Exception Handlers (centralized)

Responsibilities:
  - Translate internal exceptions into RFC 7807 responses
  - Log errors with request_id and error_id
  - Never leak storage details from unclassified errors

Collaborators:
  - crosscutting.error_responses: AppHTTPException, ErrorCode, handlers
  - crosscutting.exceptions: PaydeskError and subclasses
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..crosscutting.error_responses import (
    AppHTTPException,
    ErrorCode,
    app_exception_handler,
    generic_exception_handler,
    validation_exception_handler,
)
from ..crosscutting.exceptions import (
    DatabaseError,
    DuplicateIdentityError,
    PaydeskError,
)
from ..crosscutting.logger import logger


async def _handle_service_error(
    request: Request,
    *,
    exc: PaydeskError,
    code: ErrorCode,
    status_code: int,
    detail: str,
) -> JSONResponse:
    logger.error(
        "Service error",
        extra={
            "code": code.value,
            "error_id": exc.error_id,
            "error": type(exc).__name__,
        },
    )

    app_exc = AppHTTPException(
        status_code=status_code,
        code=code,
        detail=detail,
        errors=[{"error_id": exc.error_id}],
    )
    return await app_exception_handler(request, app_exc)


async def database_error_handler(request: Request, exc: DatabaseError) -> JSONResponse:
    return await _handle_service_error(
        request,
        exc=exc,
        code=ErrorCode.DATA_SOURCE_FAILURE,
        status_code=503,
        detail="Data source unavailable",
    )


async def duplicate_identity_handler(
    request: Request, exc: DuplicateIdentityError
) -> JSONResponse:
    return await app_exception_handler(
        request,
        AppHTTPException(409, ErrorCode.DUPLICATE_IDENTITY, exc.message),
    )


async def paydesk_error_handler(request: Request, exc: PaydeskError) -> JSONResponse:
    return await _handle_service_error(
        request,
        exc=exc,
        code=ErrorCode.INTERNAL_ERROR,
        status_code=500,
        detail="An unexpected error occurred",
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log the full stacktrace; answer with a generic 500."""
    logger.error(
        "Unhandled exception",
        exc_info=True,
        extra={"error": type(exc).__name__},
    )
    return await generic_exception_handler(request, exc)


def register_exception_handlers(app: FastAPI) -> None:
    """R: Most specific first; Starlette resolves by MRO anyway."""
    app.add_exception_handler(AppHTTPException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(DatabaseError, database_error_handler)
    app.add_exception_handler(DuplicateIdentityError, duplicate_identity_handler)
    app.add_exception_handler(PaydeskError, paydesk_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
