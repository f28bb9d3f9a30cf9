"""Core exceptions for sqlbatch."""

from pathlib import Path
from typing import Any, Dict, Optional, Union


class SQLBatchError(Exception):
    """Base exception for all sqlbatch errors.

    ``label`` names the phase that failed and prefixes the message shown by
    the CLI. ``exit_code`` is the process status the CLI exits with.
    """

    label = "Error"
    exit_code = 1

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(SQLBatchError):
    """Raised when a required input is missing."""

    label = "Validation"

    def __init__(self, message: str, field: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, details)
        self.field = field


class ConfigurationError(SQLBatchError):
    """Raised when the connection URL cannot be resolved from configuration."""

    label = "Configuration"


class ConfigReadError(ConfigurationError):
    """Raised when the config file cannot be read."""

    label = "Config read"


class ConfigFormatError(ConfigurationError):
    """Raised when the config file is not a valid DSN document."""

    label = "Config format"


class MissingConnectionError(ConfigurationError):
    """Raised when no source yields a connection URL."""

    label = "Validation"


class TargetError(SQLBatchError):
    """Raised when the target path cannot be turned into a batch."""

    label = "Target"


class InvalidTargetError(TargetError):
    """Raised for a target whose extension is neither ``.sql`` nor empty."""

    label = "Invalid target"


class FileReadError(TargetError):
    """Raised when a target file or directory cannot be read."""

    label = "File read"

    def __init__(
        self,
        message: str,
        path: Optional[Union[str, Path]] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.path = path


class DatabaseError(SQLBatchError):
    """Raised when there's an error connecting to or executing against a database."""

    label = "Database"

    def __init__(
        self,
        message: str,
        database_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.database_type = database_type


class URLParseError(DatabaseError):
    """Raised when the connection URL is malformed or names an unknown driver."""

    label = "URL parse"


class DatabaseConnectionError(DatabaseError):
    """Raised when the database cannot be reached."""

    label = "Connection"


class TransactionStartError(DatabaseError):
    """Raised when a transaction cannot be started."""

    label = "Transaction start"


class StatementExecutionError(DatabaseError):
    """Raised when a statement in the batch fails.

    The transaction has already been rolled back when this is raised.
    ``rollback_error`` holds the secondary failure if the rollback itself
    failed.
    """

    label = "Query execution"

    def __init__(
        self,
        message: str,
        statement: Optional[str] = None,
        path: Optional[Union[str, Path]] = None,
        database_type: Optional[str] = None,
        rollback_error: Optional[Exception] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, database_type, details)
        self.statement = statement
        self.path = path
        self.rollback_error = rollback_error


class RollbackError(DatabaseError):
    """Raised when rolling back a failed batch fails."""

    label = "Rollback"


class CommitError(DatabaseError):
    """Raised when an otherwise successful batch fails to commit."""

    label = "Transaction commit"
