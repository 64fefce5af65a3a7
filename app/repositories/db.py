"""DuckDB connection management."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path

import duckdb
from loguru import logger

import settings
from app.models import ALL_DDL

_local = threading.local()
_db_path: str = settings.DB_PATH

# every thread-local connection, so shutdown can close them all
_open: set[duckdb.DuckDBPyConnection] = set()
_open_lock = threading.Lock()
_generation = 0

# DuckDB resolves write conflicts optimistically; concurrent transactions
# touching the same row abort instead of waiting, so writers queue here.
_write_lock = threading.Lock()


def set_db_path(path: str | Path) -> None:
    """Point all subsequent connections at another database file."""
    global _db_path
    _db_path = str(path)
    logger.debug("DB path set: {}", _db_path)


def get_db_path() -> str:
    return _db_path


def _tables_exist(conn: duckdb.DuckDBPyConnection) -> bool:
    """Check if main tables already exist."""
    result = conn.execute(
        "SELECT COUNT(*) FROM information_schema.tables WHERE table_name = 'pokemon'"
    ).fetchone()
    return result[0] > 0


def init_tables(conn: duckdb.DuckDBPyConnection) -> None:
    """Initialize all tables from DDL statements (idempotent - uses IF NOT EXISTS)."""
    if _tables_exist(conn):
        return

    for ddl in ALL_DDL:
        conn.execute(ddl)
    logger.info("DB tables initialized")


def get_db(read_only: bool = False) -> duckdb.DuckDBPyConnection:
    """Get thread-local connection, reconnecting if the DB path changed or all were closed."""
    conn = getattr(_local, "conn", None)
    if conn is not None and (_local.path != _db_path or _local.generation != _generation):
        close_db()
        conn = None

    if conn is None:
        conn = duckdb.connect(_db_path, read_only=read_only)
        if not read_only:
            init_tables(conn)
        with _open_lock:
            _open.add(conn)
        _local.conn = conn
        _local.path = _db_path
        _local.generation = _generation
        logger.debug("DB connected: {} (read_only={})", _db_path, read_only)
    return conn


def close_db() -> None:
    """Close thread-local connection."""
    conn = getattr(_local, "conn", None)
    if conn is None:
        return
    with _open_lock:
        if conn in _open:
            _open.discard(conn)
            conn.close()
    _local.conn = None
    logger.debug("DB connection closed")


def close_all_db() -> int:
    """Close every thread-local connection, including worker threads'. Returns count."""
    global _generation
    with _open_lock:
        conns = list(_open)
        _open.clear()
        _generation += 1
        for conn in conns:
            conn.close()
    _local.conn = None
    logger.debug("Closed {} DB connections", len(conns))
    return len(conns)


def open_connections() -> int:
    with _open_lock:
        return len(_open)


@contextmanager
def transaction(conn: duckdb.DuckDBPyConnection) -> Iterator[duckdb.DuckDBPyConnection]:
    """Run the enclosed statements on `conn` as one atomic unit.

    Transactions are serialized in-process. Any exception inside the block
    (or from COMMIT itself) rolls back and is re-raised.
    """
    with _write_lock:
        conn.execute("BEGIN TRANSACTION")
        try:
            yield conn
            conn.execute("COMMIT")
        except Exception:
            # a failed COMMIT has already aborted the transaction
            with suppress(duckdb.TransactionException):
                conn.execute("ROLLBACK")
            logger.warning("Transaction rolled back")
            raise


def get_write_connection() -> duckdb.DuckDBPyConnection:
    """Get a dedicated writable connection (for ETL operations)."""
    conn = duckdb.connect(_db_path)
    init_tables(conn)
    return conn
