"""
db/connection.py
----------------
Manages the PostgreSQL connection pool behind an explicit `Database` handle.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

SQL throughout the project is written with positional `$1, $2, ...`
placeholders. psycopg2 only understands the `%s` / `%(name)s` styles, so
`to_pyformat()` rewrites the text right before execution.
"""

import re
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_PLACEHOLDER_RE = re.compile(r"\$(\d+)")


class QueryExecutionError(Exception):
    """Raised when the store rejects or fails to run a statement."""

    def __init__(self, message: str, sql: str = ""):
        super().__init__(message)
        self.sql = sql


def to_pyformat(sql: str, params: Sequence[Any]) -> tuple[str, dict[str, Any]]:
    """
    Rewrite `$n` placeholders into psycopg2 named placeholders.

    Literal percent signs in the text are doubled so psycopg2 does not read
    them as format markers. Text without placeholders is returned as is,
    to be executed with no arguments.

    Args:
        sql: Statement text using `$1..$n`.
        params: Ordered values; `params[i - 1]` binds to `$i`.

    Returns:
        The rewritten text and a `{"p<i>": value}` mapping.

    Raises:
        ValueError: If a placeholder index has no matching parameter.
    """
    bound: dict[str, Any] = {}
    if _PLACEHOLDER_RE.search(sql) is None:
        return sql, bound

    def _replace(match: re.Match) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(params):
            raise ValueError(
                f"Placeholder ${index} has no parameter ({len(params)} supplied)"
            )
        name = f"p{index}"
        bound[name] = params[index - 1]
        return f"%({name})s"

    text = _PLACEHOLDER_RE.sub(_replace, sql.replace("%", "%%"))
    return text, bound


class Database:
    """
    Handle around a psycopg2 connection pool.

    Construct one per application and pass it to the repositories that need
    it. Can be used as a context manager to open and close the pool.
    """

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self._pool: Optional[pool.SimpleConnectionPool] = None

    def __enter__(self) -> "Database":
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def open(self) -> None:
        """
        Initialize the connection pool. Calling it twice is a no-op.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.SimpleConnectionPool(self.min_conn, self.max_conn, self.dsn)
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """
        Borrow a connection from the pool for the duration of the block.

        Raises:
            RuntimeError: If the pool has not been opened.
        """
        if self._pool is None:
            raise RuntimeError("Database pool not initialized. Call open() first.")
        conn = self._pool.getconn()
        try:
            yield conn
        finally:
            self._pool.putconn(conn)

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """
        Run one statement and return its rows.

        Args:
            sql: Statement text using `$n` placeholders.
            params: Values bound to the placeholders, in order.

        Returns:
            A list of row dicts. Empty when the statement matched nothing
            or returns no rows.

        Raises:
            QueryExecutionError: If the statement fails for any reason.
        """
        text, bound = to_pyformat(sql, params)
        with self.connection() as conn:
            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(text, bound or None)
                    rows = cur.fetchall() if cur.description is not None else []
                conn.commit()
            except psycopg2.Error as e:
                logger.error(f"Query failed: {e}")
                self._rollback(conn)
                raise QueryExecutionError(str(e).strip(), sql) from e
        return [dict(row) for row in rows]

    @staticmethod
    def _rollback(conn) -> None:
        """Roll back after a failed statement; a dropped connection has nothing to undo."""
        if conn.closed:
            return
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.warning(f"Rollback failed: {e}")

    def query_one(self, sql: str, params: Sequence[Any] = ()) -> Optional[dict]:
        """Run one statement and return its first row, or None."""
        rows = self.query(sql, params)
        return rows[0] if rows else None
