"""Base database adapter: the driver capability set used by the executor."""

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Dict, Generator, Optional

from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine, Transaction, URL, make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.pool import NullPool

from sqlbatch.exceptions import (
    CommitError,
    DatabaseConnectionError,
    DatabaseError,
    RollbackError,
    TransactionStartError,
    URLParseError,
)

logger = logging.getLogger(__name__)


class BaseAdapter(ABC):
    """Base class for database adapters.

    An adapter owns at most one connection and one transaction. The executor
    drives it through ``connect()``, ``begin()``, ``execute()``, ``commit()``
    and ``rollback()``; ``connect()`` guarantees ``close()`` on every exit
    path.
    """

    # URL schemes this adapter is registered under
    schemes: tuple = ()

    def __init__(self, database_url: str) -> None:
        """Initialize database adapter.

        Args:
            database_url: Connection URL as given by the user.

        Raises:
            URLParseError: If the URL cannot be parsed.
        """
        self.database_url = database_url
        try:
            self.url: URL = make_url(database_url)
        except (ArgumentError, ValueError) as e:
            raise URLParseError(
                f"Could not parse connection URL: {e}",
                database_type=self.database_type,
            ) from e
        self._engine: Optional[Engine] = None
        self._connection: Optional[Connection] = None
        self._transaction: Optional[Transaction] = None

    @property
    def database_type(self) -> str:
        return self.schemes[0] if self.schemes else "unknown"

    @abstractmethod
    def build_connection_string(self) -> URL:
        """Build the SQLAlchemy URL for this driver.

        Returns:
            SQLAlchemy URL.
        """
        pass

    @abstractmethod
    def get_driver_name(self) -> str:
        """Get the driver name for this adapter.

        Returns:
            Driver name string.
        """
        pass

    def _get_engine_options(self) -> Dict[str, Any]:
        """Get database-specific engine options.

        Returns:
            Dictionary of engine options.
        """
        return {}

    def _configure_engine(self, engine: Engine) -> None:
        """Hook for database-specific engine event listeners."""

    def masked_url(self) -> str:
        """Connection URL with the password hidden, safe to log."""
        return self.build_connection_string().render_as_string(hide_password=True)

    def get_engine(self) -> Engine:
        """Get or create SQLAlchemy engine.

        Returns:
            SQLAlchemy engine instance.

        Raises:
            DatabaseConnectionError: If engine creation fails.
        """
        if self._engine is None:
            try:
                engine_args = {
                    'poolclass': NullPool,  # one connection per process
                    'echo': False,
                }
                engine_args.update(self._get_engine_options())

                self._engine = create_engine(self.build_connection_string(), **engine_args)
                self._configure_engine(self._engine)

            except DatabaseError:
                raise
            except Exception as e:
                raise DatabaseConnectionError(
                    f"Failed to create database engine: {e}",
                    database_type=self.database_type,
                ) from e

        return self._engine

    @contextmanager
    def connect(self) -> Generator["BaseAdapter", None, None]:
        """Open the connection and close it when the block exits.

        Yields:
            This adapter, connected.

        Raises:
            DatabaseConnectionError: If the connection cannot be opened.
        """
        self.open()
        try:
            yield self
        finally:
            self.close()

    def open(self) -> Connection:
        """Open a connection to the database."""
        engine = self.get_engine()
        logger.info(f"Connecting to {self.masked_url()}")
        try:
            self._connection = engine.connect()
        except Exception as e:
            self.close()
            raise DatabaseConnectionError(
                f"Failed to connect to database: {e}",
                database_type=self.database_type,
            ) from e
        return self._connection

    def begin(self) -> None:
        """Begin the batch transaction.

        Raises:
            TransactionStartError: If the transaction cannot be started.
        """
        connection = self._require_connection()
        try:
            self._transaction = connection.begin()
        except Exception as e:
            raise TransactionStartError(
                f"Failed to start transaction: {e}",
                database_type=self.database_type,
            ) from e
        logger.debug("Transaction started")

    def execute(self, sql: str) -> None:
        """Execute one SQL text inside the open transaction.

        Exceptions from the driver propagate unchanged; the executor decides
        how to report them.
        """
        self._execute(self._require_connection(), sql)

    def _execute(self, connection: Connection, sql: str) -> None:
        # exec_driver_sql skips bind parameter parsing, so ':' and '%' in the
        # SQL text reach the driver untouched
        connection.exec_driver_sql(sql).close()

    def commit(self) -> None:
        """Commit the batch transaction.

        Raises:
            CommitError: If the commit fails.
        """
        if self._transaction is None:
            raise CommitError("No transaction to commit", database_type=self.database_type)
        try:
            self._transaction.commit()
        except Exception as e:
            raise CommitError(
                f"Failed to commit transaction: {e}",
                database_type=self.database_type,
            ) from e
        finally:
            self._transaction = None
        logger.debug("Transaction committed")

    def rollback(self) -> None:
        """Roll back the batch transaction.

        Raises:
            RollbackError: If the rollback fails.
        """
        if self._transaction is None:
            return
        try:
            self._transaction.rollback()
        except Exception as e:
            raise RollbackError(
                f"Failed to roll back transaction: {e}",
                database_type=self.database_type,
            ) from e
        finally:
            self._transaction = None
        logger.debug("Transaction rolled back")

    def close(self) -> None:
        """Release the connection and dispose of the engine."""
        if self._connection is not None:
            try:
                self._connection.close()
            except Exception:
                logger.debug("Failed to close database connection", exc_info=True)
            self._connection = None
            self._transaction = None

        if self._engine is not None:
            self._engine.dispose()
            self._engine = None

    def _require_connection(self) -> Connection:
        if self._connection is None:
            raise DatabaseConnectionError("Not connected", database_type=self.database_type)
        return self._connection
