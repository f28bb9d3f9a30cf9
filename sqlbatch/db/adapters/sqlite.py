"""SQLite database adapter."""

from sqlalchemy import event
from sqlalchemy.engine import Engine, URL

from sqlbatch.db.base import BaseAdapter


class SQLiteAdapter(BaseAdapter):
    """SQLite database adapter.

    The stdlib driver executes one statement per call, so each SQL file must
    hold a single statement.
    """

    schemes = ("sqlite",)

    def get_driver_name(self) -> str:
        """Get the driver name for SQLite."""
        return "sqlite3"

    def build_connection_string(self) -> URL:
        """Build SQLite connection URL (``sqlite:///path``)."""
        return self.url.set(drivername="sqlite")

    def _configure_engine(self, engine: Engine) -> None:
        """Let SQLite's own BEGIN cover DDL as well as DML.

        pysqlite only opens a transaction before DML by default, which would
        autocommit ``CREATE TABLE`` and break the all-or-nothing batch.
        """

        @event.listens_for(engine, "connect")
        def do_connect(dbapi_connection, connection_record):
            dbapi_connection.isolation_level = None

        @event.listens_for(engine, "begin")
        def do_begin(conn):
            conn.exec_driver_sql("BEGIN")
