"""
Pytest configuration and fixtures for sqlbatch tests.

This module provides common fixtures: a clean process environment, helpers
for writing SQL targets and config files, and a recording fake adapter for
exercising the transaction protocol without a database.
"""
import json
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import List, Optional

import pytest

from sqlbatch.exceptions import DatabaseConnectionError, RollbackError, TransactionStartError, CommitError


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep the caller's connection settings out of every test."""
    monkeypatch.delenv("GO_SQL_DATABASE_URL", raising=False)
    monkeypatch.delenv("GO_SQL_LOG_LEVEL", raising=False)


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a JSON config document and return its path."""
    def _write(document, name: str = "go-sql.json") -> Path:
        path = tmp_path / name
        if isinstance(document, str):
            path.write_text(document, encoding="utf-8")
        else:
            path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_config_document():
    """Config with a 'default' and an 'a' entry."""
    return {
        "dsn": [
            {
                "name": "a",
                "driver": "mysql",
                "user": "alice",
                "password": "secret",
                "host": "db.example.com",
                "port": "3306",
                "db_name": "app",
                "ssl_mode": "require",
            },
            {
                "name": "default",
                "driver": "postgres",
                "user": "u",
                "password": "p",
                "host": "localhost",
                "port": "5432",
                "db_name": "db",
                "ssl_mode": "disable",
            },
        ]
    }


@pytest.fixture
def sqlite_db(tmp_path: Path):
    """An empty SQLite database file and its connection URL."""
    db_path = tmp_path / "batch.db"
    sqlite3.connect(db_path).close()
    return db_path, f"sqlite:///{db_path}"


def sqlite_tables(db_path: Path) -> List[str]:
    conn = sqlite3.connect(db_path)
    try:
        rows = conn.execute("SELECT name FROM sqlite_master WHERE type = 'table' ORDER BY name").fetchall()
    finally:
        conn.close()
    return [row[0] for row in rows]


@pytest.fixture
def table_names():
    """Return the tables present in a SQLite database file."""
    return sqlite_tables


class FakeAdapter:
    """Records the calls the executor makes; fails where told to."""

    database_type = "fake"

    def __init__(
        self,
        fail_on: Optional[str] = None,
        fail_connect: bool = False,
        fail_begin: bool = False,
        fail_rollback: bool = False,
        fail_commit: bool = False,
    ) -> None:
        self.fail_on = fail_on
        self.fail_connect = fail_connect
        self.fail_begin = fail_begin
        self.fail_rollback = fail_rollback
        self.fail_commit = fail_commit
        self.calls: List[str] = []
        self.executed: List[str] = []

    @contextmanager
    def connect(self):
        if self.fail_connect:
            raise DatabaseConnectionError("connection refused", database_type=self.database_type)
        self.calls.append("open")
        try:
            yield self
        finally:
            self.calls.append("close")

    def begin(self) -> None:
        if self.fail_begin:
            raise TransactionStartError("cannot begin", database_type=self.database_type)
        self.calls.append("begin")

    def execute(self, sql: str) -> None:
        self.calls.append("execute")
        self.executed.append(sql)
        if sql == self.fail_on:
            raise RuntimeError(f'syntax error at or near "{sql.split()[0]}"')

    def commit(self) -> None:
        if self.fail_commit:
            raise CommitError("commit failed", database_type=self.database_type)
        self.calls.append("commit")

    def rollback(self) -> None:
        self.calls.append("rollback")
        if self.fail_rollback:
            raise RollbackError("connection lost", database_type=self.database_type)

    def get_driver_name(self) -> str:
        return "fake"


@pytest.fixture
def fake_adapter():
    """Build a FakeAdapter and a factory returning it for any URL."""
    def _build(**kwargs):
        adapter = FakeAdapter(**kwargs)
        seen_urls = []

        def factory(database_url: str) -> FakeAdapter:
            seen_urls.append(database_url)
            return adapter

        factory.urls = seen_urls
        return adapter, factory

    return _build
