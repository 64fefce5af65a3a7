"""Base repository class."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger

from app.repositories import db


class BaseRepository:
    """Base repository with common functionality.

    Connections are resolved per call from the thread-local pool, so a single
    repository instance can serve requests running on different threads.
    """

    def __init__(self, read_only: bool = False):
        self._read_only = read_only
        logger.debug("{} initialized", self.__class__.__name__)

    @property
    def _db(self) -> duckdb.DuckDBPyConnection:
        return db.get_db(self._read_only)

    def execute(self, query: str, params: list | None = None) -> Any:
        """Execute SQL query."""
        if params:
            return self._db.execute(query, params)
        return self._db.execute(query)

    def fetchall(self, query: str, params: list | None = None) -> list:
        """Execute and fetch all rows."""
        return self.execute(query, params).fetchall()

    def fetchone(self, query: str, params: list | None = None) -> Any:
        """Execute and fetch one row."""
        return self.execute(query, params).fetchone()

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Run the enclosed statements as one serialized, atomic unit."""
        if self._read_only:
            raise RuntimeError("Cannot open a transaction in read-only mode")

        with db.transaction(self._db):
            yield
