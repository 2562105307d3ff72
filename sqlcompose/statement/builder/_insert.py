"""INSERT statement builder."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from io import StringIO
from typing import Any

from typing_extensions import Self

from sqlcompose.exceptions import MissingRequiredColumnsError, MissingTableError, SQLBuilderError
from sqlcompose.statement.builder._base import StatementBuilder

__all__ = ("InsertBuilder", "new_insert_builder")


@dataclass(eq=False)
class InsertBuilder(StatementBuilder):
    """Builder for INSERT statements.

    Example:
        ```python
        sql, args = (
            InsertBuilder()
            .table("users")
            .columns("name", "age")
            .values("bob", 30)
            .values("amy", 28)
            .to_sql()
        )
        # INSERT INTO `users` (name, age) VALUES (?, ?), (?, ?)
        # ["bob", 30, "amy", 28]
        ```
    """

    _columns: "list[str]" = field(default_factory=list, init=False, repr=False)
    _rows: "list[tuple[Any, ...]]" = field(default_factory=list, init=False, repr=False)

    statement_kind = "INSERT"

    def table(self, table: str) -> Self:
        self._add_table(table)
        return self

    def columns(self, *columns: str) -> Self:
        self._columns.extend(columns)
        return self

    def values(self, *row: Any) -> Self:
        """Add one row of values, in column order."""
        self._rows.append(row)
        return self

    def set_map(self, values: "Mapping[str, Any]") -> Self:
        """Add a single row from a mapping of column to value.

        The first call on a builder without columns adopts the mapping's keys
        as the column list, in the mapping's iteration order, which this
        builder does not guarantee. Once columns are known, the mapping must
        name exactly those columns and its values are added in column order.

        Raises:
            SQLBuilderError: If the mapping's keys differ from the known columns.

        Returns:
            The current builder instance for method chaining.
        """
        if not self._columns:
            self._columns.extend(values.keys())
            self._rows.append(tuple(values.values()))
            return self

        if len(values) != len(self._columns) or set(values) != set(self._columns):
            msg = f"set_map keys {sorted(values)} do not match insert columns {sorted(self._columns)}"
            raise SQLBuilderError(msg)
        self._rows.append(tuple(values[column] for column in self._columns))
        return self

    def _validate(self) -> None:
        if not self._tables:
            self._fail(MissingTableError("insert statements must specify a table"))
        if not self._rows:
            self._fail(MissingRequiredColumnsError("insert statements must have at least one set of values"))
        for index, row in enumerate(self._rows):
            if not row:
                msg = f"insert row {index} has no values"
                self._fail(SQLBuilderError(msg))
            if self._columns and len(row) != len(self._columns):
                msg = f"insert row {index} has {len(row)} values but {len(self._columns)} columns were given"
                self._fail(SQLBuilderError(msg))

    def _render(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        args = self._append_prefixes(buffer, args)
        args = self._append_keyword(buffer, args)

        buffer.write("INTO ")
        args = self._tables.append_to_sql(buffer, ", ", args)

        if self._columns:
            buffer.write(" (")
            buffer.write(", ".join(self._columns))
            buffer.write(")")

        buffer.write(" VALUES ")
        rows = []
        for row in self._rows:
            rows.append("(" + ", ".join("?" for _ in row) + ")")
            args.extend(row)
        buffer.write(", ".join(rows))
        return self._append_suffixes(buffer, args)


def new_insert_builder(**kwargs: Any) -> InsertBuilder:
    return InsertBuilder(**kwargs)
