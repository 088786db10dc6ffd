"""Base repository class."""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import duckdb
from loguru import logger

from app.clock import Clock, SystemClock
from app.repositories.errors import translate_error


class BaseRepository:
    """Base repository with cursor handling and error translation."""

    def __init__(self, db: duckdb.DuckDBPyConnection, clock: Clock | None = None):
        self._db = db
        self._clock = clock or SystemClock()
        logger.debug("{} initialized", self.__class__.__name__)

    @contextmanager
    def cursor(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Yield a private cursor on the shared connection."""
        try:
            cur = self._db.cursor()
        except duckdb.Error as e:
            raise translate_error(e) from e
        try:
            yield cur
        except duckdb.Error as e:
            raise translate_error(e) from e
        finally:
            cur.close()

    @contextmanager
    def transaction(self) -> Iterator[duckdb.DuckDBPyConnection]:
        """Yield a cursor inside BEGIN/COMMIT, rolling back on failure."""
        with self.cursor() as cur:
            cur.execute("BEGIN TRANSACTION")
            try:
                yield cur
                cur.execute("COMMIT")
            except Exception:
                cur.execute("ROLLBACK")
                raise

    def fetchall(self, query: str, params: list | None = None) -> list[dict[str, Any]]:
        """Execute and fetch all rows as dicts."""
        with self.cursor() as cur:
            return self._run(cur, query, params)

    def fetchone(self, query: str, params: list | None = None) -> dict[str, Any] | None:
        """Execute and fetch the first row as a dict."""
        rows = self.fetchall(query, params)
        return rows[0] if rows else None

    @staticmethod
    def _run(cur: duckdb.DuckDBPyConnection, query: str, params: list | None = None) -> list[dict[str, Any]]:
        """Execute on the given cursor and return rows as dicts."""
        if params:
            cur.execute(query, params)
        else:
            cur.execute(query)
        if cur.description is None:
            return []
        names = [d[0] for d in cur.description]
        return [dict(zip(names, row)) for row in cur.fetchall()]
