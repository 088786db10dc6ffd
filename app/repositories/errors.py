"""Store errors raised by repositories."""

import duckdb


class StoreError(Exception):
    """Base class for persistent store failures."""


class StoreUnavailable(StoreError):
    """The store cannot be reached (closed connection, unreadable file)."""


class QueryFailed(StoreError):
    """The store rejected a query."""


def translate_error(exc: duckdb.Error) -> StoreError:
    """Map a DuckDB exception to a store error."""
    if isinstance(exc, (duckdb.ConnectionException, duckdb.IOException)):
        return StoreUnavailable(str(exc))
    return QueryFailed(str(exc))
