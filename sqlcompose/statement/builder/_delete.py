"""DELETE statement builder."""

from dataclasses import dataclass, field
from io import StringIO
from typing import Any

from typing_extensions import Self

from sqlcompose.exceptions import MissingTableError, MissingWhereConditionError
from sqlcompose.statement.builder._base import StatementBuilder
from sqlcompose.statement.builder.mixins import (
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    WhereClauseMixin,
)

__all__ = ("DeleteBuilder", "new_delete_builder")


@dataclass(eq=False)
class DeleteBuilder(StatementBuilder, JoinClauseMixin, WhereClauseMixin, OrderByClauseMixin, LimitOffsetClauseMixin):
    """Builder for DELETE statements.

    A WHERE condition is mandatory. To delete every row pass an explicit
    always-true condition.

    Example:
        ```python
        sql, args = DeleteBuilder().table("users").where("id = ?", 5).limit(1).to_sql()
        # DELETE FROM `users` WHERE id = ? LIMIT 1
        # [5]
        ```
    """

    _alias: "list[str]" = field(default_factory=list, init=False, repr=False)
    _using: str = field(default="", init=False, repr=False)

    statement_kind = "DELETE"

    def table(self, table: str, *extra: str) -> Self:
        """Add a table to delete from.

        Args:
            table: The table name. It is quoted.
            *extra: Words written after the table, e.g. an alias.

        Returns:
            The current builder instance for method chaining.
        """
        self._add_table(table, *extra)
        return self

    def alias(self, *aliases: str) -> Self:
        """Name the tables rows are deleted from in a multi-table DELETE (``DELETE u FROM ...``)."""
        self._alias.extend(aliases)
        return self

    def using(self, sql: str) -> Self:
        self._using = sql
        return self

    def _validate(self) -> None:
        if not self._tables:
            self._fail(MissingTableError("delete statements must specify a table"))
        if not self._wheres:
            self._fail(MissingWhereConditionError("delete statements must have WHERE condition"))

    def _render(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        args = self._append_prefixes(buffer, args)
        args = self._append_keyword(buffer, args)

        if self._alias:
            buffer.write(", ".join(self._alias))
            buffer.write(" ")

        buffer.write("FROM ")
        args = self._tables.append_to_sql(buffer, ", ", args)

        if self._using:
            buffer.write(" USING ")
            buffer.write(self._using)

        args = self._append_joins(buffer, args)
        args = self._append_where(buffer, args)
        self._append_order_by(buffer)
        self._append_limit_offset(buffer)
        return self._append_suffixes(buffer, args)


def new_delete_builder(**kwargs: Any) -> DeleteBuilder:
    return DeleteBuilder(**kwargs)
