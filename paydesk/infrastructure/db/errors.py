"""
Name: Connection Pool Errors

Responsibilities:
  - Typed errors instead of generic RuntimeError for pool lifecycle misuse
"""


class DatabasePoolError(Exception):
    """Base for connection pool errors."""


class PoolAlreadyInitializedError(DatabasePoolError):
    """init_pool() called twice."""


class PoolNotInitializedError(DatabasePoolError):
    """Pool used before init_pool()."""
