"""DuckDB connection management."""

import duckdb
from loguru import logger

from app.models import ALL_DDL
from app.repositories.errors import translate_error


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize sequences and tables (idempotent - uses IF NOT EXISTS)."""
    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def connect(path: str) -> duckdb.DuckDBPyConnection:
    """Open the store and make sure the schema exists.

    The returned connection is shared by all repositories; each repository call
    works on its own cursor.
    """
    try:
        conn = duckdb.connect(path)
        init_tables(conn)
    except duckdb.Error as e:
        raise translate_error(e) from e
    logger.debug("DB connected: {}", path)
    return conn


def close(conn: duckdb.DuckDBPyConnection | None) -> None:
    """Close the shared connection."""
    if conn is not None:
        conn.close()
        logger.debug("DB connection closed")
