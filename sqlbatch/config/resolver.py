"""Connection URL resolution.

The effective URL is taken from the first source that yields a non-empty
value:

1. the ``--database-url`` flag;
2. the ``dsn`` entry named by ``--config-name`` in the ``--config`` file;
3. the ``GO_SQL_DATABASE_URL`` environment variable.
"""

import logging
from typing import Optional

from sqlbatch.config.models import (
    DATABASE_URL_ENV,
    DEFAULT_CONFIG_NAME,
    EnvironmentSettings,
    RunOptions,
)
from sqlbatch.config.parser import ConfigParser
from sqlbatch.exceptions import MissingConnectionError

logger = logging.getLogger(__name__)


class ConnectionResolver:
    """Picks the connection URL for a run."""

    def __init__(
        self,
        settings: Optional[EnvironmentSettings] = None,
        parser: Optional[ConfigParser] = None,
    ) -> None:
        self.settings = settings if settings is not None else EnvironmentSettings()
        self.parser = parser or ConfigParser()

    def resolve(self, options: RunOptions) -> str:
        """Return the connection URL for ``options``.

        The config file is loaded whenever a path is given, so a broken file
        fails the run even when the flag would have won.

        Raises:
            ConfigReadError: If the config file cannot be read.
            ConfigFormatError: If the config file is malformed.
            MissingConnectionError: If no source yields a URL.
        """
        config_url = self._from_config(options)

        if options.database_url:
            logger.debug("Using connection URL from --database-url")
            return options.database_url

        if config_url:
            return config_url

        if self.settings.database_url:
            logger.debug(f"Using connection URL from {DATABASE_URL_ENV}")
            return self.settings.database_url

        raise MissingConnectionError(
            "database-url is required: pass --database-url, select an entry with "
            f"--config/--config-name, or set {DATABASE_URL_ENV}",
            details={"field": "database-url"},
        )

    def _from_config(self, options: RunOptions) -> str:
        if not options.config_path:
            return ""

        document = self.parser.load_config(options.config_path)
        name = options.config_name or DEFAULT_CONFIG_NAME
        spec = document.select(name)
        if spec is None:
            logger.warning(
                f"No DSN entry named '{name}' in {options.config_path} "
                f"(available: {document.names}); falling back to the next source"
            )
            return ""

        logger.debug(f"Using connection URL from config entry '{name}' ({spec.driver.value})")
        return spec.to_url()


def resolve_database_url(options: RunOptions, settings: Optional[EnvironmentSettings] = None) -> str:
    """Resolve the connection URL for ``options``."""
    return ConnectionResolver(settings).resolve(options)
