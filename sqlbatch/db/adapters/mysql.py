"""MySQL database adapter."""

import ssl
from typing import Any, Dict

from pymysql.constants import CLIENT
from sqlalchemy.engine import Connection, URL

from sqlbatch.db.base import BaseAdapter
from sqlbatch.exceptions import DatabaseConnectionError

# libpq-style sslmode values that skip TLS entirely
SSL_DISABLED_MODES = {"", "disable"}
# modes that verify the server certificate against a CA
SSL_VERIFY_MODES = {"verify-ca", "verify-full"}


class MySQLAdapter(BaseAdapter):
    """MySQL database adapter."""

    schemes = ("mysql",)

    def get_driver_name(self) -> str:
        """Get the driver name for MySQL."""
        return "pymysql"

    @property
    def ssl_mode(self) -> str:
        value = self.url.query.get("sslmode", "")
        if isinstance(value, tuple):
            value = value[-1]
        return value

    def build_connection_string(self) -> URL:
        """Build MySQL connection URL.

        PyMySQL has no ``sslmode`` parameter, so it is dropped from the query
        and translated into connect args instead.
        """
        url = self.url.set(drivername="mysql+pymysql").difference_update_query(["sslmode"])
        if url.port is None:
            url = url.set(port=3306)

        # Set default charset if not specified
        if "charset" not in url.query:
            url = url.update_query_dict({"charset": "utf8mb4"})

        return url

    def _get_engine_options(self) -> Dict[str, Any]:
        """Get MySQL-specific engine options."""
        # a single file may hold several statements
        connect_args: Dict[str, Any] = {"client_flag": CLIENT.MULTI_STATEMENTS}

        mode = self.ssl_mode
        if mode in SSL_VERIFY_MODES:
            connect_args["ssl"] = self._verified_ssl_args(check_hostname=mode == "verify-full")
        elif mode not in SSL_DISABLED_MODES:
            # encrypted, certificate not checked
            connect_args["ssl"] = {"check_hostname": False}

        return {"connect_args": connect_args}

    def _verified_ssl_args(self, check_hostname: bool) -> Dict[str, Any]:
        """PyMySQL ssl args that verify the server against the system CA store.

        PyMySQL disables verification when neither ``ca`` nor ``capath`` is
        given, so a missing CA store is an error rather than a downgrade.
        """
        paths = ssl.get_default_verify_paths()
        if paths.cafile is None and paths.capath is None:
            raise DatabaseConnectionError(
                f"sslmode={self.ssl_mode} requires a CA bundle, but no system CA store was found",
                database_type=self.database_type,
            )
        return {
            "ca": paths.cafile,
            "capath": paths.capath,
            "verify_mode": ssl.CERT_REQUIRED,
            "check_hostname": check_hostname,
        }

    def _execute(self, connection: Connection, sql: str) -> None:
        # drain every result set so an error in a later statement of a
        # multi-statement file surfaces here rather than at commit
        cursor = connection.connection.cursor()
        try:
            cursor.execute(sql)
            while cursor.nextset():
                pass
        finally:
            cursor.close()
