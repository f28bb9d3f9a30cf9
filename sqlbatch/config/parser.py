"""Configuration file parser for sqlbatch."""

import json
import logging
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from sqlbatch.config.models import ConfigDocument
from sqlbatch.exceptions import ConfigFormatError, ConfigReadError

logger = logging.getLogger(__name__)


class ConfigParser:
    """Loads and validates the JSON DSN document."""

    def load_config(self, config_path: Union[str, Path]) -> ConfigDocument:
        """Load and validate configuration from a JSON file.

        Args:
            config_path: Path to the configuration file.

        Returns:
            Validated ConfigDocument instance.

        Raises:
            ConfigReadError: If the file cannot be read.
            ConfigFormatError: If the content is not a valid DSN document.
        """
        config_file = Path(config_path)

        try:
            content = config_file.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigReadError(
                f"Could not read configuration file '{config_file}': {e}",
                details={"path": str(config_file)},
            ) from e

        try:
            raw_config = json.loads(content)
        except json.JSONDecodeError as e:
            raise ConfigFormatError(f"Invalid JSON in '{config_file}': {e}") from e

        if not isinstance(raw_config, dict):
            raise ConfigFormatError(
                f"Configuration file '{config_file}' must contain a JSON object, "
                f"got {type(raw_config).__name__}"
            )

        try:
            document = ConfigDocument.model_validate(raw_config)
        except ValidationError as e:
            raise ConfigFormatError(f"Configuration validation failed for '{config_file}': {e}") from e

        logger.debug(f"Loaded {len(document.dsn)} DSN entries from {config_file}")
        return document


def load_config(config_path: Union[str, Path]) -> ConfigDocument:
    """Load a configuration file.

    Args:
        config_path: Path to configuration file.

    Returns:
        Validated ConfigDocument.
    """
    return ConfigParser().load_config(config_path)
