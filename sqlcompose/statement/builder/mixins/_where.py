from dataclasses import dataclass, field
from io import StringIO
from typing import Any

from typing_extensions import Self

from sqlcompose.statement.clause import Clause
from sqlcompose.statement.expression import Expression, WhereExpressionList

__all__ = ("WhereClauseMixin",)


@dataclass(eq=False)
class WhereClauseMixin:
    """Mixin providing WHERE for statement builders."""

    _wheres: WhereExpressionList = field(default_factory=WhereExpressionList, init=False, repr=False)

    def where(self, sql: str, *args: Any) -> Self:
        """Add a WHERE fragment.

        Fragments from repeated calls are written separated by a single space,
        each in its own parentheses once there is more than one. Put the
        boolean operator inside the fragment text, or build the whole
        condition with :class:`~sqlcompose.statement.clause.And` /
        :class:`~sqlcompose.statement.clause.Or` and :meth:`where_clause`.

        Args:
            sql: Condition text with ``?`` placeholders.
            *args: One value per placeholder.

        Returns:
            The current builder instance for method chaining.
        """
        self._wheres.append(Expression(sql, *args))
        return self

    def where_clause(self, clause: Clause) -> Self:
        """Replace every WHERE fragment with the rendering of ``clause``.

        A clause that renders to empty text leaves the builder untouched.

        Raises:
            ClauseRenderError: If the clause fails to render.

        Returns:
            The current builder instance for method chaining.
        """
        sql, args = clause.to_sql()
        if not sql:
            return self
        self._wheres.clear()
        self._wheres.append(Expression(sql, *args))
        return self

    def _append_where(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        if self._wheres:
            buffer.write(" WHERE ")
            args = self._wheres.append_to_sql(buffer, " ", args)
        return args
