"""Configuration management for sqlbatch."""

from sqlbatch.config.models import (
    DATABASE_URL_ENV,
    DEFAULT_CONFIG_NAME,
    DriverType,
    ConnectionSpec,
    ConfigDocument,
    RunOptions,
    EnvironmentSettings,
)
from sqlbatch.config.parser import (
    ConfigParser,
    load_config,
)
from sqlbatch.config.resolver import (
    ConnectionResolver,
    resolve_database_url,
)

__all__ = [
    # Models
    "DATABASE_URL_ENV",
    "DEFAULT_CONFIG_NAME",
    "DriverType",
    "ConnectionSpec",
    "ConfigDocument",
    "RunOptions",
    "EnvironmentSettings",
    # Parser
    "ConfigParser",
    "load_config",
    # Resolution
    "ConnectionResolver",
    "resolve_database_url",
]
