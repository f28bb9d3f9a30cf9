"""
Transactional batch execution.

Every WorkItem of a batch runs inside one transaction: the batch commits only
when all of them succeed, and the first failure rolls the whole batch back.
"""
import logging
import time
from typing import Callable, Optional

from sqlbatch.config.models import EnvironmentSettings, RunOptions
from sqlbatch.config.resolver import ConnectionResolver
from sqlbatch.db.base import BaseAdapter
from sqlbatch.db.connection import AdapterFactory
from sqlbatch.exceptions import RollbackError, StatementExecutionError, ValidationError
from sqlbatch.executor.models import BatchResult, ExecutionBatch
from sqlbatch.executor.targets import collect_work_items

logger = logging.getLogger(__name__)

AdapterFactoryFn = Callable[[str], BaseAdapter]


def validate_required(field: str, value: Optional[str]) -> None:
    """Raise ValidationError if ``value`` is empty."""
    if not value:
        raise ValidationError(f"{field} is required", field=field)


class BatchExecutor:
    """Runs an ExecutionBatch against one database connection."""

    def __init__(self, adapter_factory: Optional[AdapterFactoryFn] = None) -> None:
        """
        Initialize batch executor.

        Args:
            adapter_factory: Builds the adapter for a connection URL. Defaults
                to the scheme registry in ``AdapterFactory``.
        """
        self.adapter_factory = adapter_factory or AdapterFactory.create_adapter

    def run(self, target: str, database_url: str) -> BatchResult:
        """Collect the batch for ``target`` and execute it.

        Target problems are reported before any connection is attempted.
        """
        validate_required("target", target)
        validate_required("database-url", database_url)

        batch = collect_work_items(target)
        return self.execute_batch(batch, database_url)

    def execute_batch(self, batch: ExecutionBatch, database_url: str) -> BatchResult:
        """
        Execute every item of ``batch`` in order inside one transaction.

        Args:
            batch: Items to execute.
            database_url: Connection URL; its scheme selects the adapter.

        Returns:
            BatchResult for the committed batch.

        Raises:
            URLParseError: If the URL is malformed or names no known driver.
            DatabaseConnectionError: If the database cannot be reached.
            TransactionStartError: If the transaction cannot be started.
            StatementExecutionError: If a statement fails; the transaction
                has been rolled back and later items were not attempted.
            CommitError: If the final commit fails.
        """
        start_time = time.time()
        adapter = self.adapter_factory(database_url)

        with adapter.connect():
            adapter.begin()

            for index, item in enumerate(batch, start=1):
                logger.debug(f"Executing {item.path} ({index}/{len(batch)})")
                try:
                    adapter.execute(item.sql)
                except Exception as e:
                    logger.error(f"Statement from {item.path} failed: {e}")
                    rollback_error = self._rollback(adapter)
                    raise StatementExecutionError(
                        f"Statement failed: {e}",
                        statement=item.sql,
                        path=item.path,
                        database_type=adapter.database_type,
                        rollback_error=rollback_error,
                        details={"index": index, "total": len(batch)},
                    ) from e

            adapter.commit()

        execution_time = time.time() - start_time
        logger.info(f"Committed {len(batch)} statement(s) in {execution_time:.3f}s")
        return BatchResult(
            statements_executed=len(batch),
            committed=True,
            execution_time=execution_time,
            driver=adapter.get_driver_name(),
        )

    def _rollback(self, adapter: BaseAdapter) -> Optional[RollbackError]:
        """Roll back after a failed statement, returning any rollback failure."""
        try:
            adapter.rollback()
        except RollbackError as e:
            logger.error(f"Rollback failed: {e}")
            return e
        return None


def run(
    options: RunOptions,
    settings: Optional[EnvironmentSettings] = None,
    adapter_factory: Optional[AdapterFactoryFn] = None,
) -> BatchResult:
    """Resolve the connection URL for ``options`` and run its target."""
    validate_required("target", options.target)

    database_url = ConnectionResolver(settings).resolve(options)
    return BatchExecutor(adapter_factory).run(options.target, database_url)
