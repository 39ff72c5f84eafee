"""Infrastructure adapters (PostgreSQL, in-memory)."""
