"""Allow ``python -m sqlbatch``."""

from sqlbatch.cli.main import cli

if __name__ == "__main__":
    cli()
