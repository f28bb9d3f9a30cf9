"""Database connectivity and transactional execution."""

from sqlbatch.db.base import BaseAdapter
from sqlbatch.db.connection import AdapterFactory, parse_scheme
from sqlbatch.db.adapters import (
    PostgreSQLAdapter,
    MySQLAdapter,
    SQLiteAdapter,
)

__all__ = [
    # Base classes
    "BaseAdapter",
    # Adapter registry
    "AdapterFactory",
    "parse_scheme",
    # Database adapters
    "PostgreSQLAdapter",
    "MySQLAdapter",
    "SQLiteAdapter",
]
