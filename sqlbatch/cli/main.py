"""Main CLI entry point for sqlbatch."""

from __future__ import annotations

from typing import Optional

import click

from sqlbatch import __version__
from sqlbatch.cli.utils import console, print_error, print_exception, setup_logging
from sqlbatch.config import DATABASE_URL_ENV, DEFAULT_CONFIG_NAME, EnvironmentSettings, RunOptions
from sqlbatch.exceptions import SQLBatchError
from sqlbatch.executor import run

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


@click.command(name="sqlbatch", context_settings=CONTEXT_SETTINGS)
@click.option(
    "--target", "-t",
    required=True,
    help="[required] Path to a .sql file, or to a directory whose files are all executed",
)
@click.option(
    "--database-url", "-d",
    default="",
    help=f"Database URL (postgres or mysql). Overrides --config and ${DATABASE_URL_ENV}",
)
@click.option("--config", "-c", "config_path", default=None, help="Path to a JSON configuration file")
@click.option(
    "--config-name", "-n",
    default=DEFAULT_CONFIG_NAME,
    show_default=True,
    help="Name of the 'dsn' entry to use from the configuration file",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.version_option(__version__, prog_name="sqlbatch")
def cli(
    target: str,
    database_url: str,
    config_path: Optional[str],
    config_name: str,
    verbose: bool,
) -> None:
    """Run SQL against the database described by the connection settings.

    A path to a .sql file runs that file. A path to a directory runs every
    file directly inside it, in file name order. All statements share one
    transaction: if any fails, none are committed.
    """
    options = RunOptions(
        target=target,
        database_url=database_url,
        config_path=config_path,
        config_name=config_name,
        verbose=verbose,
    )
    settings = EnvironmentSettings()
    setup_logging(options.verbose, settings.log_level)

    try:
        result = run(options, settings)
    except SQLBatchError as exc:
        print_error(exc)
        raise SystemExit(exc.exit_code) from exc
    except Exception as exc:
        print_exception("Error", exc, options.verbose)
        raise SystemExit(1) from exc

    console.print(
        f"[green]Done 🦩[/green] [dim]{result.statements_executed} statement(s) committed "
        f"in {result.execution_time:.2f}s[/dim]"
    )


def main() -> None:
    """Console script entry point."""
    cli()


if __name__ == "__main__":
    main()
