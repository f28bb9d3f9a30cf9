"""
Core models for batch execution.

A run turns its target into an ExecutionBatch of WorkItems, one per SQL file,
and reports a BatchResult once the batch has been committed.
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class WorkItem:
    """The full SQL text of one file, executed as a single statement."""
    path: Path
    sql: str


@dataclass
class ExecutionBatch:
    """Ordered WorkItems executed in one transaction."""
    target: Path
    items: List[WorkItem] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[WorkItem]:
        return iter(self.items)

    @property
    def statements(self) -> List[str]:
        return [item.sql for item in self.items]

    @property
    def is_empty(self) -> bool:
        return not self.items


@dataclass
class BatchResult:
    """Outcome of a committed batch."""
    statements_executed: int
    committed: bool
    execution_time: float = 0.0
    driver: Optional[str] = None
