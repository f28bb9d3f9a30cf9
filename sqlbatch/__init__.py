"""sqlbatch: run SQL files against a database in a single transaction.

sqlbatch provides:
- Connection URL resolution from a flag, a JSON config file or the environment
- Single-file and directory targets
- All-or-nothing execution: every statement commits together or none do
- PostgreSQL, MySQL and SQLite drivers
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Core exports
from sqlbatch.exceptions import SQLBatchError, ConfigurationError, DatabaseError

__all__ = [
    "__version__",
    "SQLBatchError",
    "ConfigurationError",
    "DatabaseError",
]
