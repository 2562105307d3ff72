"""Literal SQL fragments and ordered lists of them.

An :class:`Expression` pairs a piece of SQL text with the values bound to the
``?`` placeholders inside it. Lists of expressions render by joining their
text with a separator while collecting every argument in the same order, so
the final argument list always lines up with the placeholders of the final SQL.
"""

from collections.abc import Iterator
from io import StringIO
from typing import Any, Optional

__all__ = ("Expression", "ExpressionList", "WhereExpressionList")


class Expression:
    """An immutable SQL fragment with its positional arguments."""

    __slots__ = ("_args", "_text")

    def __init__(self, text: str, *args: Any) -> None:
        object.__setattr__(self, "_text", text)
        object.__setattr__(self, "_args", tuple(args))

    @classmethod
    def make(cls, text: str, *args: Any) -> "Expression":
        return cls(text, *args)

    @property
    def text(self) -> str:
        return self._text

    @property
    def args(self) -> "tuple[Any, ...]":
        return self._args

    def to_sql(self) -> "tuple[str, list[Any]]":
        return self._text, list(self._args)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Expression):
            return NotImplemented
        return self._text == other._text and self._args == other._args

    def __hash__(self) -> int:
        """Hash text and args. Raises ``TypeError`` when an argument is unhashable, e.g. a list."""
        return hash((self._text, self._args))

    def __repr__(self) -> str:
        return f"Expression({self._text!r}, args={list(self._args)!r})"


class ExpressionList:
    """Ordered, append-only sequence of :class:`Expression`."""

    __slots__ = ("_items",)

    def __init__(self, items: "Optional[list[Expression]]" = None) -> None:
        self._items: list[Expression] = list(items) if items else []

    def append(self, expression: Expression) -> None:
        self._items.append(expression)

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> "Iterator[Expression]":
        return iter(self._items)

    def __getitem__(self, index: int) -> Expression:
        return self._items[index]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def _write_text(self, buffer: StringIO, text: str) -> None:
        buffer.write(text)

    def append_to_sql(self, buffer: StringIO, sep: str, args: "list[Any]") -> "list[Any]":
        """Write every fragment into ``buffer`` and collect its arguments.

        Args:
            buffer: Destination for the SQL text.
            sep: Written between consecutive fragments, never before the first or after the last.
            args: Argument list to extend. It is extended in place and returned.

        Returns:
            The argument list with each fragment's arguments appended in order.
        """
        for index, expression in enumerate(self._items):
            if index > 0:
                buffer.write(sep)
            self._write_text(buffer, expression.text)
            args.extend(expression.args)
        return args


class WhereExpressionList(ExpressionList):
    """Expression list that parenthesizes each fragment when there are several.

    A lone condition is written as is. With two or more, every fragment is
    wrapped in its own pair of parentheses so that an ``OR`` inside one
    fragment cannot bind across its neighbours.
    """

    __slots__ = ()

    def _write_text(self, buffer: StringIO, text: str) -> None:
        if len(self._items) > 1:
            buffer.write("(")
            buffer.write(text)
            buffer.write(")")
        else:
            buffer.write(text)
