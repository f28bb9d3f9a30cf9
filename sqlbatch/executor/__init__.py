"""Batch collection and transactional execution."""

from sqlbatch.executor.models import BatchResult, ExecutionBatch, WorkItem
from sqlbatch.executor.targets import collect_work_items, read_sql_file
from sqlbatch.executor.executor import BatchExecutor, run, validate_required

__all__ = [
    "BatchResult",
    "ExecutionBatch",
    "WorkItem",
    "collect_work_items",
    "read_sql_file",
    "BatchExecutor",
    "run",
    "validate_required",
]
