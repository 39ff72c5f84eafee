"""
Name: Standard Error Responses (RFC 7807 / Problem Details)

Responsibilities:
  - Define the catalogue of stable error codes (ErrorCode)
  - Build RFC 7807 payloads (ErrorDetail)
  - Provide factories for frequent errors
  - Provide FastAPI handlers returning application/problem+json

Collaborators:
  - crosscutting/middleware.py (request_id)
  - api/exception_handlers.py (maps internal errors)
  - interfaces/api/http/error_mapping.py (maps use-case results)

Notes:
  - Clients branch on "code", never on "detail"
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel


class ErrorCode(str, Enum):
    # 4xx
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNAUTHENTICATED = "UNAUTHENTICATED"
    WRONG_PASSWORD = "WRONG_PASSWORD"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    NOT_FOUND = "NOT_FOUND"
    DUPLICATE_IDENTITY = "DUPLICATE_IDENTITY"
    ALREADY_GENERATED = "ALREADY_GENERATED"

    # 5xx
    INTERNAL_ERROR = "INTERNAL_ERROR"
    PARTIAL_PAYROLL_RUN = "PARTIAL_PAYROLL_RUN"
    DATA_SOURCE_FAILURE = "DATA_SOURCE_FAILURE"


class ErrorDetail(BaseModel):
    """
    RFC 7807 (Problem Details) model.

    Extra fields:
    - code: stable error code for clients
    - errors: optional list of details (e.g. [{"reason": "expired_token"}])
    """

    type: str = "about:blank"
    title: str
    status: int
    detail: str
    code: ErrorCode
    instance: str | None = None
    errors: list[dict[str, Any]] | None = None


PROBLEM_JSON_MEDIA_TYPE = "application/problem+json"

_OPENAPI_ERROR_CONTENT = {
    PROBLEM_JSON_MEDIA_TYPE: {"schema": {"$ref": "#/components/schemas/ErrorDetail"}}
}


def _problem_response(description: str) -> dict[str, Any]:
    return {
        "description": f"{description} (RFC7807)",
        "model": ErrorDetail,
        "content": _OPENAPI_ERROR_CONTENT,
    }


OPENAPI_ERROR_RESPONSES = {
    "401": _problem_response("Unauthenticated"),
    "404": _problem_response("Not Found"),
    "409": _problem_response("Conflict"),
    "422": _problem_response("Validation Error"),
    "503": _problem_response("Data Source Unavailable"),
    "default": _problem_response("Error"),
}


class AppHTTPException(HTTPException):
    """
    R: HTTPException carrying a stable ErrorCode.

    Transports optional error details (errors[]) and custom headers
    (WWW-Authenticate, etc.).
    """

    def __init__(
        self,
        status_code: int,
        code: ErrorCode,
        detail: str,
        errors: list[dict[str, Any]] | None = None,
        headers: dict[str, str] | None = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.code = code
        self.errors = errors


# ---------------------------------------------------------------------------
# Error factories
# ---------------------------------------------------------------------------
def validation_error(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(422, ErrorCode.VALIDATION_ERROR, detail, errors)


def not_found(resource: str, identifier: str) -> AppHTTPException:
    return AppHTTPException(
        404, ErrorCode.NOT_FOUND, f"{resource} '{identifier}' not found"
    )


def unauthenticated(
    detail: str = "Authentication required", reason: str | None = None
) -> AppHTTPException:
    return AppHTTPException(
        401,
        ErrorCode.UNAUTHENTICATED,
        detail,
        errors=[{"reason": reason}] if reason else None,
        headers={"WWW-Authenticate": "Bearer"},
    )


def duplicate_identity(detail: str = "Email already exists") -> AppHTTPException:
    return AppHTTPException(409, ErrorCode.DUPLICATE_IDENTITY, detail)


def user_not_found(detail: str = "User not found") -> AppHTTPException:
    return AppHTTPException(404, ErrorCode.USER_NOT_FOUND, detail)


def wrong_password(detail: str = "Wrong password") -> AppHTTPException:
    return AppHTTPException(
        401,
        ErrorCode.WRONG_PASSWORD,
        detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def already_generated(period: str) -> AppHTTPException:
    return AppHTTPException(
        409,
        ErrorCode.ALREADY_GENERATED,
        f"Payroll already generated for {period}",
        errors=[{"period": period}],
    )


def partial_payroll_run(
    detail: str, errors: list[dict[str, Any]] | None = None
) -> AppHTTPException:
    return AppHTTPException(500, ErrorCode.PARTIAL_PAYROLL_RUN, detail, errors)


def data_source_failure(
    detail: str = "Data source unavailable", error_id: str | None = None
) -> AppHTTPException:
    errors = [{"error_id": error_id}] if error_id else None
    return AppHTTPException(503, ErrorCode.DATA_SOURCE_FAILURE, detail, errors)


def internal_error(detail: str = "An unexpected error occurred") -> AppHTTPException:
    return AppHTTPException(500, ErrorCode.INTERNAL_ERROR, detail)


# ---------------------------------------------------------------------------
# FastAPI handlers
# ---------------------------------------------------------------------------
async def app_exception_handler(
    request: Request, exc: AppHTTPException
) -> JSONResponse:
    """
    Handler for AppHTTPException.

    Includes instance (URL) and propagates optional headers.
    """
    request_id = getattr(getattr(request, "state", None), "request_id", None)

    errors = exc.errors or []
    if request_id:
        errors = [*errors, {"request_id": request_id}]

    error = ErrorDetail(
        type=f"about:blank/{exc.code.value.lower()}",
        title=exc.code.value.replace("_", " ").title(),
        status=exc.status_code,
        detail=str(exc.detail),
        code=exc.code,
        instance=str(request.url),
        errors=errors or None,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=error.model_dump(mode="json", exclude_none=True),
        headers=getattr(exc, "headers", None),
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )


async def validation_exception_handler(request: Request, exc) -> JSONResponse:
    """Handler for FastAPI RequestValidationError (422 as problem+json)."""
    errors = [
        {"loc": list(err.get("loc", [])), "msg": err.get("msg", "")}
        for err in exc.errors()
    ]
    return await app_exception_handler(
        request, validation_error("Request validation failed", errors)
    )


async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """
    Fallback handler for unhandled exceptions.
    (Does not expose internal details to the client.)
    """
    request_id = getattr(getattr(request, "state", None), "request_id", None)
    errors = [{"request_id": request_id}] if request_id else None

    error = ErrorDetail(
        type="about:blank/internal_error",
        title="Internal Server Error",
        status=500,
        detail="An unexpected error occurred",
        code=ErrorCode.INTERNAL_ERROR,
        instance=str(request.url),
        errors=errors,
    )
    return JSONResponse(
        status_code=500,
        content=error.model_dump(mode="json", exclude_none=True),
        media_type=PROBLEM_JSON_MEDIA_TYPE,
    )
