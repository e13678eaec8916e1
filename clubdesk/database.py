"""Thin SQLite connection wrapper used by the club system."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any


class Database:
    """A single SQLite connection with explicit transaction control."""

    def __init__(self) -> None:
        self._conn: sqlite3.Connection | None = None

    def connect(self, path: str) -> None:
        """Open the database at *path*, closing any previous connection."""
        if self._conn is not None:
            self.disconnect()
        # Autocommit mode: transactions are started explicitly via transaction().
        self._conn = sqlite3.connect(path, isolation_level=None)
        self.execute("PRAGMA foreign_keys = ON")

    def disconnect(self) -> None:
        """Close the connection if one is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def is_connected(self) -> bool:
        return self._conn is not None

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("Database not connected")
        return self._conn

    def execute(self, query: str, params: Sequence[Any] = ()) -> None:
        """Run a statement that returns no rows."""
        self._connection().execute(query, tuple(params))

    def fetch_all(self, query: str, params: Sequence[Any] = ()) -> list[tuple[Any, ...]]:
        """Run a query and return every row as a tuple."""
        return self._connection().execute(query, tuple(params)).fetchall()

    @contextmanager
    def transaction(self) -> Iterator[Database]:
        """Wrap a block in BEGIN/COMMIT, rolling back if it raises."""
        self.execute("BEGIN TRANSACTION")
        try:
            yield self
        except BaseException:
            self.execute("ROLLBACK")
            raise
        self.execute("COMMIT")