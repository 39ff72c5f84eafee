"""
Name: Root API Router

Responsibilities:
  - Compose the feature routers (auth, directory, payroll)
  - Attach the RFC 7807 responses to the OpenAPI schema

Notes:
  - Mounted under /api by api/main.py
"""

from __future__ import annotations

from fastapi import APIRouter

from ....crosscutting.error_responses import OPENAPI_ERROR_RESPONSES
from .routers.auth import router as auth_router
from .routers.employees import router as employees_router
from .routers.payroll import router as payroll_router


def build_router() -> APIRouter:
    api_router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)
    api_router.include_router(auth_router)
    api_router.include_router(employees_router)
    api_router.include_router(payroll_router)
    return api_router


router = build_router()

__all__ = ["router", "build_router"]
