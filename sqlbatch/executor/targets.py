"""Turn a target path into an ExecutionBatch."""

import logging
from pathlib import Path
from typing import Union

from sqlbatch.exceptions import FileReadError, InvalidTargetError
from sqlbatch.executor.models import ExecutionBatch, WorkItem

logger = logging.getLogger(__name__)

SQL_SUFFIX = ".sql"


def read_sql_file(path: Path) -> str:
    """Return the full text of ``path``.

    Raises:
        FileReadError: If the file cannot be read or is not UTF-8.
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(f"Could not read '{path}': {e}", path=path) from e


def collect_work_items(target: Union[str, Path]) -> ExecutionBatch:
    """Build the batch for ``target``.

    A ``.sql`` target yields one WorkItem. A target without an extension is
    read as a directory: every direct entry that is not itself a directory
    becomes a WorkItem, whatever its extension, in file name order.

    Raises:
        InvalidTargetError: If the target has any other extension.
        FileReadError: If the file or directory cannot be read.
    """
    target_path = Path(target)
    suffix = target_path.suffix

    if suffix == SQL_SUFFIX:
        batch = ExecutionBatch(target=target_path, items=[WorkItem(target_path, read_sql_file(target_path))])
    elif suffix == "":
        batch = ExecutionBatch(target=target_path, items=_collect_directory(target_path))
    else:
        raise InvalidTargetError(
            f"Unsupported target extension '{suffix}': expected a .sql file or a directory",
            details={"target": str(target_path)},
        )

    logger.info(f"Collected {len(batch)} SQL file(s) from {target_path}")
    return batch


def _collect_directory(directory: Path) -> list:
    try:
        entries = sorted(directory.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise FileReadError(f"Could not list directory '{directory}': {e}", path=directory) from e

    items = []
    for entry in entries:
        if entry.is_dir():
            logger.debug(f"Skipping subdirectory {entry}")
            continue
        items.append(WorkItem(entry, read_sql_file(entry)))
    return items
