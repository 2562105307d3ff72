"""Hand rendered statements to a database.

The builders never talk to a database themselves. They render SQL and
arguments and pass them to a :class:`~sqlcompose.protocols.StatementPreparer`.
Errors raised while preparing or executing are propagated untouched.
"""

import contextlib
from collections.abc import Sequence
from contextlib import closing
from typing import Any

from sqlcompose.protocols import PreparedStatement, StatementPreparer
from sqlcompose.utils.logging import get_logger

__all__ = ("CursorStatement", "DBAPIPreparer", "execute", "preparer_for", "query")

logger = get_logger("driver")


def execute(preparer: StatementPreparer, sql: str, *args: Any) -> Any:
    """Prepare ``sql``, execute it with ``args`` and release the statement.

    Returns:
        Whatever the prepared statement's ``execute`` returns.
    """
    logger.debug("Preparing statement: %s", sql, extra={"extra_fields": {"parameter_count": len(args)}})
    with closing(preparer.prepare(sql)) as stmt:
        return stmt.execute(args)


def query(preparer: StatementPreparer, sql: str, *args: Any) -> Any:
    """Prepare ``sql``, run it as a query with ``args`` and release the statement.

    Returns:
        Whatever the prepared statement's ``query`` returns.
    """
    logger.debug("Preparing query: %s", sql, extra={"extra_fields": {"parameter_count": len(args)}})
    with closing(preparer.prepare(sql)) as stmt:
        return stmt.query(args)


class CursorStatement:
    """Prepared statement backed by a DB-API 2.0 cursor.

    DB-API has no explicit prepare step, so the SQL is kept and handed to
    ``cursor.execute`` together with the arguments.
    """

    __slots__ = ("cursor", "sql")

    def __init__(self, cursor: Any, sql: str) -> None:
        self.cursor = cursor
        self.sql = sql

    def execute(self, args: "Sequence[Any]") -> int:
        """Execute and return the affected row count."""
        self.cursor.execute(self.sql, tuple(args))
        return self.cursor.rowcount

    def query(self, args: "Sequence[Any]") -> "list[Any]":
        self.cursor.execute(self.sql, tuple(args))
        return self.cursor.fetchall()

    def close(self) -> None:
        with contextlib.suppress(Exception):
            self.cursor.close()


class DBAPIPreparer:
    """Adapt a DB-API 2.0 connection (``sqlite3``, ``pymysql``, ...) to :class:`StatementPreparer`."""

    __slots__ = ("connection",)

    def __init__(self, connection: Any) -> None:
        self.connection = connection

    def prepare(self, sql: str) -> PreparedStatement:
        return CursorStatement(self.connection.cursor(), sql)

    def __repr__(self) -> str:
        return f"DBAPIPreparer({self.connection!r})"


def preparer_for(target: Any) -> StatementPreparer:
    """Return ``target`` if it already prepares statements, otherwise wrap it as a DB-API connection."""
    if isinstance(target, StatementPreparer):
        return target
    return DBAPIPreparer(target)
