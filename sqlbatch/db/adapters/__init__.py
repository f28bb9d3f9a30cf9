"""Database adapters for different database types."""

from sqlbatch.db.adapters.postgresql import PostgreSQLAdapter
from sqlbatch.db.adapters.mysql import MySQLAdapter
from sqlbatch.db.adapters.sqlite import SQLiteAdapter

__all__ = [
    "PostgreSQLAdapter",
    "MySQLAdapter",
    "SQLiteAdapter",
]
