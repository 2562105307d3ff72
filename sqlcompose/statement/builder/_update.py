"""UPDATE statement builder."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from io import StringIO
from typing import Any

from typing_extensions import Self

from sqlcompose.exceptions import MissingRequiredColumnsError, MissingTableError, MissingWhereConditionError
from sqlcompose.statement.builder._base import StatementBuilder
from sqlcompose.statement.builder.mixins import (
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    WhereClauseMixin,
)
from sqlcompose.statement.clause import CompositeClause, SetClause, SetExprClause

__all__ = ("UpdateBuilder", "new_update_builder")


@dataclass(eq=False)
class UpdateBuilder(StatementBuilder, JoinClauseMixin, WhereClauseMixin, OrderByClauseMixin, LimitOffsetClauseMixin):
    """Builder for UPDATE statements.

    SET assignments are kept in a :class:`~sqlcompose.statement.clause.CompositeClause`
    and render in the order :meth:`set` was called.

    Example:
        ```python
        sql, args = (
            UpdateBuilder()
            .table("users")
            .set("name", "bob")
            .set("age", 30)
            .where("id = ?", 5)
            .to_sql()
        )
        # UPDATE `users` SET name=?, age=? WHERE id = ?
        # ["bob", 30, 5]
        ```
    """

    _sets: CompositeClause = field(default_factory=CompositeClause, init=False, repr=False)

    statement_kind = "UPDATE"

    def table(self, table: str, *extra: str) -> Self:
        """Add a table to update.

        Args:
            table: The table name. It is quoted.
            *extra: Words written after the table, e.g. an alias.

        Returns:
            The current builder instance for method chaining.
        """
        self._add_table(table, *extra)
        return self

    def set(self, column: str, value: Any) -> Self:
        """Assign ``value`` to ``column``. Columns render in call order.

        Returns:
            The current builder instance for method chaining.
        """
        self._sets.append(SetClause(column, value))
        return self

    def set_expr(self, column: str, sql: str, *args: Any) -> Self:
        """Assign a raw SQL expression to ``column``, e.g. ``set_expr("hits", "hits + ?", 1)``."""
        self._sets.append(SetExprClause(column, sql, *args))
        return self

    def set_map(self, values: "Mapping[str, Any]") -> Self:
        """Assign every column/value pair of ``values``.

        The order in which these columns render follows the mapping's
        iteration order and is not guaranteed by this builder. Call
        :meth:`set` repeatedly when the column order matters.

        Returns:
            The current builder instance for method chaining.
        """
        for column, value in values.items():
            self._sets.append(SetClause(column, value))
        return self

    def _validate(self) -> None:
        if not self._tables:
            self._fail(MissingTableError("update statements must specify a table"))
        if not self._sets:
            self._fail(MissingRequiredColumnsError("update statements must have at least one Set"))
        if not self._wheres:
            self._fail(MissingWhereConditionError("update statements must have WHERE condition"))

    def _render(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        args = self._append_prefixes(buffer, args)
        args = self._append_keyword(buffer, args)
        args = self._tables.append_to_sql(buffer, ", ", args)
        args = self._append_joins(buffer, args)

        buffer.write(" SET ")
        args = self._sets.append_to_sql(buffer, args)

        args = self._append_where(buffer, args)
        self._append_order_by(buffer)
        self._append_limit_offset(buffer)
        return self._append_suffixes(buffer, args)


def new_update_builder(**kwargs: Any) -> UpdateBuilder:
    return UpdateBuilder(**kwargs)
