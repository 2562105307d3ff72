from dataclasses import dataclass, field
from io import StringIO
from typing import TYPE_CHECKING, Any

from typing_extensions import Self

if TYPE_CHECKING:
    from sqlcompose.config import StatementConfig

__all__ = ("JoinClauseMixin",)


@dataclass(eq=False)
class JoinClauseMixin:
    """Mixin providing JOIN clauses.

    Join text is written in call order. The values bound by every join are
    written after all of the join text, not interleaved per join.
    """

    _joins: "list[str]" = field(default_factory=list, init=False, repr=False)
    _join_args: "list[Any]" = field(default_factory=list, init=False, repr=False)

    if TYPE_CHECKING:
        config: StatementConfig

    def join(self, join: str, table: str, suffix: str = "", *args: Any) -> Self:
        """Add a join.

        Args:
            join: The join keyword(s), e.g. ``"INNER JOIN"``.
            table: The table to join. It is quoted.
            suffix: Text written after the table, e.g. ``"AS p ON p.user_id = u.id AND p.kind = ?"``.
            *args: Values for the placeholders in ``suffix``.

        Returns:
            The current builder instance for method chaining.
        """
        parts = [join, self.config.quote(table)]
        if suffix:
            parts.append(suffix)
        self._joins.append(" ".join(parts))
        self._join_args.extend(args)
        return self

    def left_join(self, table: str, suffix: str = "", *args: Any) -> Self:
        return self.join("LEFT JOIN", table, suffix, *args)

    def right_join(self, table: str, suffix: str = "", *args: Any) -> Self:
        return self.join("RIGHT JOIN", table, suffix, *args)

    def inner_join(self, table: str, suffix: str = "", *args: Any) -> Self:
        return self.join("INNER JOIN", table, suffix, *args)

    def _append_joins(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        if self._joins:
            buffer.write(" ")
            buffer.write(" ".join(self._joins))
            args.extend(self._join_args)
        return args
