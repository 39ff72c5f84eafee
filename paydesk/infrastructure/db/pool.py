"""
Name: PostgreSQL Connection Pool

Responsibilities:
  - Manage connection pool lifecycle (init, get, close)
  - Apply statement_timeout to each new connection

Collaborators:
  - psycopg_pool: Connection pooling
  - main.py lifespan: init on startup, close on shutdown

Constraints:
  - One pool per process
  - Must init before use, close on shutdown

Notes:
  - Thread-safe (FastAPI sync handlers run in a threadpool)
"""

from typing import Optional
import threading

from psycopg_pool import ConnectionPool

from ...crosscutting.logger import logger
from .errors import PoolAlreadyInitializedError, PoolNotInitializedError


# R: Singleton pool instance
_pool: Optional[ConnectionPool] = None
_pool_lock = threading.Lock()


def _make_configure(statement_timeout_ms: int):
    """R: Build the per-connection configure callback."""

    def _configure_connection(conn) -> None:
        if statement_timeout_ms > 0:
            conn.execute(f"SET statement_timeout = {int(statement_timeout_ms)}")
            conn.commit()

    return _configure_connection


def init_pool(
    database_url: str,
    min_size: int,
    max_size: int,
    statement_timeout_ms: int = 0,
) -> ConnectionPool:
    """
    R: Initialize the connection pool.

    Raises:
        PoolAlreadyInitializedError: If pool already initialized
    """
    global _pool

    with _pool_lock:
        if _pool is not None:
            raise PoolAlreadyInitializedError("Connection pool already initialized")

        logger.info(
            "Initializing connection pool",
            extra={"min_size": min_size, "max_size": max_size},
        )

        _pool = ConnectionPool(
            conninfo=database_url,
            min_size=min_size,
            max_size=max_size,
            configure=_make_configure(statement_timeout_ms),
            open=True,
        )
        return _pool


def get_pool() -> ConnectionPool:
    """
    R: Get the connection pool singleton.

    Raises:
        PoolNotInitializedError: If pool not initialized
    """
    if _pool is None:
        raise PoolNotInitializedError(
            "Connection pool not initialized. Call init_pool() first."
        )
    return _pool


def close_pool() -> None:
    """R: Close the connection pool. Safe to call when not initialized."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            logger.info("Closing connection pool")
            _pool.close()
            _pool = None


def reset_pool() -> None:
    """R: Reset pool for testing."""
    global _pool

    with _pool_lock:
        if _pool is not None:
            _pool.close()
        _pool = None
