"""Renderable clauses.

A clause knows how to write itself into a SQL buffer and how to append the
values bound to its placeholders. Composite clauses keep their children in
the order they were appended, which is what makes ``UPDATE ... SET`` render
columns in exactly the order ``set()`` was called.
"""

from abc import ABC, abstractmethod
from io import StringIO
from typing import Any

from sqlcompose.exceptions import ClauseRenderError

__all__ = ("And", "Clause", "CompositeClause", "Eq", "Or", "Raw", "SetClause", "SetExprClause")


class Clause(ABC):
    """Base class for anything that renders to SQL text plus arguments."""

    __slots__ = ()

    @abstractmethod
    def append_to_sql(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        """Write this clause into ``buffer`` and extend ``args`` with its values.

        Raises:
            ClauseRenderError: If the clause cannot be rendered.

        Returns:
            The extended argument list.
        """

    def to_sql(self) -> "tuple[str, list[Any]]":
        buffer = StringIO()
        args = self.append_to_sql(buffer, [])
        return buffer.getvalue(), args

    def __str__(self) -> str:
        return self.to_sql()[0]


class SetClause(Clause):
    """A single ``column=?`` assignment."""

    __slots__ = ("column", "value")

    def __init__(self, column: str, value: Any) -> None:
        self.column = column
        self.value = value

    def append_to_sql(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        if not self.column:
            msg = "set clause requires a column name"
            raise ClauseRenderError(msg)
        buffer.write(f"{self.column}=?")
        args.append(self.value)
        return args

    def __repr__(self) -> str:
        return f"SetClause({self.column!r}, {self.value!r})"


class SetExprClause(Clause):
    """A ``column=<sql>`` assignment whose right-hand side is raw SQL.

    Example:
        ``SetExprClause("hits", "hits + ?", 1)`` renders ``hits=hits + ?``.
    """

    __slots__ = ("args", "column", "sql")

    def __init__(self, column: str, sql: str, *args: Any) -> None:
        self.column = column
        self.sql = sql
        self.args = args

    def append_to_sql(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        if not self.column:
            msg = "set clause requires a column name"
            raise ClauseRenderError(msg)
        if not self.sql:
            msg = f"set clause for column {self.column!r} has an empty expression"
            raise ClauseRenderError(msg)
        buffer.write(f"{self.column}={self.sql}")
        args.extend(self.args)
        return args

    def __repr__(self) -> str:
        return f"SetExprClause({self.column!r}, {self.sql!r}, args={list(self.args)!r})"


class Raw(Clause):
    """Literal SQL text with its arguments, usable wherever a clause is."""

    __slots__ = ("args", "sql")

    def __init__(self, sql: str, *args: Any) -> None:
        self.sql = sql
        self.args = args

    def append_to_sql(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        buffer.write(self.sql)
        args.extend(self.args)
        return args


class Eq(Clause):
    """``column = ?``"""

    __slots__ = ("column", "value")

    def __init__(self, column: str, value: Any) -> None:
        self.column = column
        self.value = value

    def append_to_sql(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        if not self.column:
            msg = "comparison requires a column name"
            raise ClauseRenderError(msg)
        buffer.write(f"{self.column} = ?")
        args.append(self.value)
        return args


class CompositeClause(Clause):
    """Ordered list of child clauses joined by a separator.

    Children render strictly in append order. A child that renders no text is
    skipped without emitting a separator. If any child raises, the error
    propagates and nothing of the composite is usable.
    """

    __slots__ = ("_children", "sep")

    wrap_children: bool = False

    def __init__(self, *children: Clause, sep: str = ", ") -> None:
        self.sep = sep
        self._children: list[Clause] = list(children)

    def append(self, *children: Clause) -> "CompositeClause":
        self._children.extend(children)
        return self

    @property
    def children(self) -> "tuple[Clause, ...]":
        return tuple(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __bool__(self) -> bool:
        return bool(self._children)

    def append_to_sql(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        rendered: list[str] = []
        collected: list[Any] = []
        for child in self._children:
            child_sql, child_args = child.to_sql()
            if not child_sql:
                continue
            rendered.append(child_sql)
            collected.extend(child_args)

        if self.wrap_children and len(rendered) > 1:
            rendered = [f"({text})" for text in rendered]
        buffer.write(self.sep.join(rendered))
        args.extend(collected)
        return args

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(c) for c in self._children)})"


class And(CompositeClause):
    """Children joined with ``AND``, each parenthesized when there are several."""

    __slots__ = ()

    wrap_children = True

    def __init__(self, *children: Clause) -> None:
        super().__init__(*children, sep=" AND ")


class Or(CompositeClause):
    """Children joined with ``OR``, each parenthesized when there are several."""

    __slots__ = ()

    wrap_children = True

    def __init__(self, *children: Clause) -> None:
        super().__init__(*children, sep=" OR ")
