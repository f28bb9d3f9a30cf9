"""PostgreSQL database adapter."""

from typing import Any, Dict

from sqlalchemy.engine import URL

from sqlbatch.db.base import BaseAdapter


class PostgreSQLAdapter(BaseAdapter):
    """PostgreSQL database adapter."""

    schemes = ("postgres", "postgresql")

    def get_driver_name(self) -> str:
        """Get the driver name for PostgreSQL."""
        return "psycopg2"

    def build_connection_string(self) -> URL:
        """Build PostgreSQL connection URL.

        Query parameters such as ``sslmode`` are passed through to libpq.
        """
        url = self.url.set(drivername="postgresql+psycopg2")
        if url.port is None:
            url = url.set(port=5432)
        return url

    def _get_engine_options(self) -> Dict[str, Any]:
        """Get PostgreSQL-specific engine options."""
        return {
            'connect_args': {
                'application_name': 'sqlbatch',
            }
        }
