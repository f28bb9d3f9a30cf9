"""Shared CLI utilities for sqlbatch."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from sqlbatch.exceptions import SQLBatchError, StatementExecutionError

# Single console instance reused across CLI modules
console = Console()
error_console = Console(stderr=True)


def setup_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """Configure the root logger for a CLI run.

    Args:
        verbose: Log everything at DEBUG.
        level: Level name used when not verbose.
    """
    resolved = logging.DEBUG if verbose else logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        resolved = logging.WARNING

    logging.basicConfig(
        level=resolved,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=error_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def print_error(error: SQLBatchError) -> None:
    """Render a failed run: the phase, the detail and, for statements, the SQL."""
    if isinstance(error, StatementExecutionError):
        if error.path is not None:
            console.print(f"File: {escape(str(error.path))}", soft_wrap=True)
        if error.statement is not None:
            console.print(f"Query: {escape(error.statement)}", soft_wrap=True)

    console.print(f"[red]{escape(error.label)} error: {escape(error.message)}[/red]", soft_wrap=True)

    if isinstance(error, StatementExecutionError) and error.rollback_error is not None:
        console.print(
            f"[red]Rollback error: {escape(error.rollback_error.message)}[/red]",
            soft_wrap=True,
        )


def print_exception(message: str, error: Exception, verbose: bool = False) -> None:
    """Render a formatted exception message.

    Args:
        message: Friendly context message to display before the exception.
        error: Original exception instance.
        verbose: When True, render the full traceback for debugging.
    """
    console.print(f"[red]{escape(message)}: {escape(str(error))}[/red]", soft_wrap=True)
    if verbose:
        import traceback

        console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
