"""Adapter registry keyed on connection URL scheme."""

import logging
from typing import Dict, List, Type
from urllib.parse import urlsplit

from sqlbatch.db.base import BaseAdapter
from sqlbatch.db.adapters.postgresql import PostgreSQLAdapter
from sqlbatch.db.adapters.mysql import MySQLAdapter
from sqlbatch.db.adapters.sqlite import SQLiteAdapter
from sqlbatch.exceptions import URLParseError

logger = logging.getLogger(__name__)


def parse_scheme(database_url: str) -> str:
    """Extract the driver scheme from a connection URL.

    Raises:
        URLParseError: If the URL is malformed or has no scheme.
    """
    try:
        scheme = urlsplit(database_url).scheme
    except ValueError as e:
        raise URLParseError(f"Could not parse connection URL: {e}") from e

    if not scheme:
        raise URLParseError("Connection URL has no scheme (expected e.g. 'postgres://...')")
    return scheme.lower()


class AdapterFactory:
    """Factory for creating database adapters."""

    _adapters: Dict[str, Type[BaseAdapter]] = {
        scheme: adapter_class
        for adapter_class in (PostgreSQLAdapter, MySQLAdapter, SQLiteAdapter)
        for scheme in adapter_class.schemes
    }

    @classmethod
    def create_adapter(cls, database_url: str) -> BaseAdapter:
        """Create a database adapter for a connection URL.

        Args:
            database_url: Connection URL; its scheme selects the adapter.

        Returns:
            Database adapter instance.

        Raises:
            URLParseError: If the URL is malformed or its scheme is not supported.
        """
        scheme = parse_scheme(database_url)
        adapter_class = cls._adapters.get(scheme)
        if not adapter_class:
            raise URLParseError(
                f"Unsupported database driver: '{scheme}'. "
                f"Supported drivers: {cls.get_supported_schemes()}",
                database_type=scheme,
            )

        logger.debug(f"Selected {adapter_class.__name__} for scheme '{scheme}'")
        return adapter_class(database_url)

    @classmethod
    def register_adapter(cls, scheme: str, adapter_class: Type[BaseAdapter]) -> None:
        """Register a custom database adapter.

        Args:
            scheme: URL scheme handled by the adapter.
            adapter_class: Adapter class to register.
        """
        cls._adapters[scheme.lower()] = adapter_class

    @classmethod
    def get_supported_schemes(cls) -> List[str]:
        """Get list of supported URL schemes."""
        return sorted(cls._adapters.keys())
