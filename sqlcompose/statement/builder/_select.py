"""SELECT statement builder."""

from dataclasses import dataclass, field
from io import StringIO
from typing import Any

from typing_extensions import Self

from sqlcompose.exceptions import MissingRequiredColumnsError
from sqlcompose.statement.builder._base import StatementBuilder
from sqlcompose.statement.builder.mixins import (
    JoinClauseMixin,
    LimitOffsetClauseMixin,
    OrderByClauseMixin,
    WhereClauseMixin,
)
from sqlcompose.statement.clause import Clause
from sqlcompose.statement.expression import Expression, ExpressionList, WhereExpressionList

__all__ = ("SelectBuilder", "new_select_builder")


@dataclass(eq=False)
class SelectBuilder(StatementBuilder, JoinClauseMixin, WhereClauseMixin, OrderByClauseMixin, LimitOffsetClauseMixin):
    """Builder for SELECT statements.

    Unlike DELETE and UPDATE, the WHERE clause is optional and so is FROM.

    Example:
        ```python
        sql, args = (
            SelectBuilder()
            .select("id", "name")
            .from_("users", "AS u")
            .where("u.status = ?", "active")
            .order_by("u.id")
            .to_sql()
        )
        # SELECT id, name FROM `users` AS u WHERE u.status = ? ORDER BY u.id
        ```
    """

    _columns: ExpressionList = field(default_factory=ExpressionList, init=False, repr=False)
    _group_bys: "list[str]" = field(default_factory=list, init=False, repr=False)
    _havings: WhereExpressionList = field(default_factory=WhereExpressionList, init=False, repr=False)

    statement_kind = "SELECT"

    def select(self, *columns: str) -> Self:
        for column in columns:
            self._columns.append(Expression(column))
        return self

    def select_expr(self, sql: str, *args: Any) -> Self:
        """Add a result column containing placeholders, e.g. ``"COALESCE(nick, ?) AS nick"``."""
        self._columns.append(Expression(sql, *args))
        return self

    def from_(self, table: str, *extra: str) -> Self:
        """Add a table to select from.

        Args:
            table: The table name. It is quoted.
            *extra: Words written after the table, e.g. an alias.

        Returns:
            The current builder instance for method chaining.
        """
        self._add_table(table, *extra)
        return self

    def group_by(self, *items: str) -> Self:
        self._group_bys.extend(items)
        return self

    def having(self, sql: str, *args: Any) -> Self:
        self._havings.append(Expression(sql, *args))
        return self

    def having_clause(self, clause: Clause) -> Self:
        """Replace every HAVING fragment with the rendering of ``clause``."""
        sql, args = clause.to_sql()
        if not sql:
            return self
        self._havings.clear()
        self._havings.append(Expression(sql, *args))
        return self

    def _validate(self) -> None:
        if not self._columns:
            self._fail(MissingRequiredColumnsError("select statements must have at least one result column"))

    def _render(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        args = self._append_prefixes(buffer, args)
        args = self._append_keyword(buffer, args)
        args = self._columns.append_to_sql(buffer, ", ", args)

        if self._tables:
            buffer.write(" FROM ")
            args = self._tables.append_to_sql(buffer, ", ", args)

        args = self._append_joins(buffer, args)
        args = self._append_where(buffer, args)

        if self._group_bys:
            buffer.write(" GROUP BY ")
            buffer.write(", ".join(self._group_bys))

        if self._havings:
            buffer.write(" HAVING ")
            args = self._havings.append_to_sql(buffer, " ", args)

        self._append_order_by(buffer)
        self._append_limit_offset(buffer)
        return self._append_suffixes(buffer, args)


def new_select_builder(**kwargs: Any) -> SelectBuilder:
    return SelectBuilder(**kwargs)
