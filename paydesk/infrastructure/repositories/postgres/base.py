"""
Name: PostgreSQL Repository Base

Responsibilities:
  - Resolve the connection pool (injected or process singleton)
  - Classify driver errors into DatabaseError without leaking SQL details
"""

from __future__ import annotations

from typing import NoReturn, Optional

import psycopg
from psycopg_pool import ConnectionPool

from ....crosscutting.exceptions import DatabaseError
from ....crosscutting.logger import logger


class PostgresRepository:
    """R: Shared pool access and error classification."""

    def __init__(self, pool: Optional[ConnectionPool] = None):
        self._pool = pool

    def _get_pool(self) -> ConnectionPool:
        if self._pool is not None:
            return self._pool

        from ...db.pool import get_pool

        return get_pool()

    def ping(self) -> bool:
        """R: Cheap connectivity probe for /healthz."""
        try:
            with self._get_pool().connection() as conn:
                conn.execute("SELECT 1")
            return True
        except psycopg.Error:
            return False

    def _fail(self, operation: str, exc: psycopg.Error) -> NoReturn:
        error = DatabaseError(f"{operation} failed", original_error=exc)
        logger.error(
            f"{type(self).__name__}: {operation} failed",
            extra={
                "error_id": error.error_id,
                "error": type(exc).__name__,
                "sqlstate": getattr(exc, "sqlstate", None),
            },
        )
        raise error from exc
