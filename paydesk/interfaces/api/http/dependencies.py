"""
Name: HTTP Dependencies (Access Gate adapter)

Responsibilities:
  - Run the Access Gate before every protected route
  - Hand the AccessContext to the handler as an explicit parameter
  - Translate UnauthenticatedError into a 401 problem response

Collaborators:
  - identity.access_gate.AccessGate
  - container.get_access_gate
  - crosscutting.error_responses.unauthenticated
"""

from __future__ import annotations

from fastapi import Depends, Header

from ....container import get_access_gate
from ....crosscutting.error_responses import unauthenticated
from ....crosscutting.logger import logger
from ....identity.access_gate import AccessContext, AccessGate, UnauthenticatedError


def require_access(
    authorization: str | None = Header(default=None, alias="Authorization"),
    gate: AccessGate = Depends(get_access_gate),
) -> AccessContext:
    """R: Dependency for protected routes; any authenticated identity passes."""
    try:
        access = gate.authenticate(authorization)
    except UnauthenticatedError as exc:
        logger.info("Access denied", extra={"reason": exc.reason})
        raise unauthenticated(exc.message, reason=exc.reason) from exc

    return access
