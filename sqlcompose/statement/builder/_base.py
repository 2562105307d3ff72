"""Shared machinery for the statement builders.

Every builder accumulates typed slots through chained mutators and renders
them with :meth:`StatementBuilder.to_sql`. Rendering is a pure read of the
builder's state: it validates first, then walks the sections in a fixed order
writing SQL text into one buffer and arguments into one list, so the
argument order always equals the placeholder order of the returned SQL.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from io import StringIO
from typing import Any, ClassVar, NoReturn

from typing_extensions import Self

from sqlcompose import driver
from sqlcompose.config import DEFAULT_CONFIG, StatementConfig
from sqlcompose.exceptions import SQLBuilderError, SQLComposeError
from sqlcompose.statement.expression import Expression, ExpressionList
from sqlcompose.statement.parameters import validate_parameters
from sqlcompose.utils.logging import get_logger

__all__ = ("BuiltStatement", "StatementBuilder")

logger = get_logger("builder")


@dataclass(frozen=True)
class BuiltStatement:
    """A rendered statement: SQL text with ``?`` placeholders and its arguments."""

    sql: str
    parameters: "list[Any]" = field(default_factory=list)

    def as_tuple(self) -> "tuple[str, list[Any]]":
        return self.sql, list(self.parameters)

    def validate(self) -> None:
        """Check that there is exactly one parameter per placeholder.

        Raises:
            MissingParameterError: Fewer parameters than placeholders.
            ExtraParameterError: More parameters than placeholders.
        """
        validate_parameters(self.sql, self.parameters)


@dataclass(eq=False)
class StatementBuilder(ABC):
    """Base class for statement builders.

    Holds the slots every statement kind shares: prefixes, options, tables
    and suffixes. Clause-specific slots come from the mixins.
    """

    config: StatementConfig = field(default=DEFAULT_CONFIG)
    _prefixes: ExpressionList = field(default_factory=ExpressionList, init=False, repr=False)
    _options: ExpressionList = field(default_factory=ExpressionList, init=False, repr=False)
    _tables: ExpressionList = field(default_factory=ExpressionList, init=False, repr=False)
    _suffixes: ExpressionList = field(default_factory=ExpressionList, init=False, repr=False)

    statement_kind: ClassVar[str] = ""

    def prefix(self, sql: str, *args: Any) -> Self:
        """Add a fragment written before the statement keyword, e.g. a CTE."""
        self._prefixes.append(Expression(sql, *args))
        return self

    def options(self, *options: str) -> Self:
        """Add keyword options written right after the statement keyword, e.g. ``LOW_PRIORITY``."""
        for option in options:
            self._options.append(Expression(option))
        return self

    def suffix(self, sql: str, *args: Any) -> Self:
        """Add a fragment written at the very end of the statement."""
        self._suffixes.append(Expression(sql, *args))
        return self

    def _add_table(self, table: str, *extra: str) -> None:
        words = [self.config.quote(table), *extra]
        self._tables.append(Expression(" ".join(words)))

    def _fail(self, error: SQLBuilderError) -> NoReturn:
        logger.debug("Refusing to render %s statement: %s", self.statement_kind or "SQL", error)
        raise error

    @abstractmethod
    def _validate(self) -> None:
        """Raise if the builder is missing a required slot."""

    @abstractmethod
    def _render(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        """Write every populated section, in order, into ``buffer``."""

    def _append_prefixes(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        if self._prefixes:
            args = self._prefixes.append_to_sql(buffer, " ", args)
            buffer.write(" ")
        return args

    def _append_keyword(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        buffer.write(f"{self.statement_kind} ")
        if self._options:
            args = self._options.append_to_sql(buffer, " ", args)
            buffer.write(" ")
        return args

    def _append_suffixes(self, buffer: StringIO, args: "list[Any]") -> "list[Any]":
        if self._suffixes:
            buffer.write(" ")
            args = self._suffixes.append_to_sql(buffer, " ", args)
        return args

    def to_sql(self) -> "tuple[str, list[Any]]":
        """Render the statement.

        Raises:
            MissingTableError: No table was given.
            MissingRequiredColumnsError: A statement that needs columns has none.
            MissingWhereConditionError: DELETE or UPDATE without a WHERE condition.
            ClauseRenderError: A clause failed to render.

        Returns:
            The SQL text and the arguments in placeholder order.
        """
        self._validate()
        buffer = StringIO()
        args = self._render(buffer, [])
        sql = buffer.getvalue()
        if self.config.validate_parameters:
            validate_parameters(sql, args)
        return sql, args

    def build(self) -> BuiltStatement:
        sql, args = self.to_sql()
        return BuiltStatement(sql, args)

    def execute(self, target: Any) -> Any:
        """Render and execute the statement.

        Args:
            target: A :class:`~sqlcompose.protocols.StatementPreparer` or a DB-API connection.

        Returns:
            The execution result, unmodified.
        """
        sql, args = self.to_sql()
        return driver.execute(driver.preparer_for(target), sql, *args)

    def query(self, target: Any) -> Any:
        """Render the statement and run it as a query, e.g. a SELECT or a DELETE ... RETURNING.

        Args:
            target: A :class:`~sqlcompose.protocols.StatementPreparer` or a DB-API connection.

        Returns:
            The rows returned by the prepared statement, unmodified.
        """
        sql, args = self.to_sql()
        return driver.query(driver.preparer_for(target), sql, *args)

    def __str__(self) -> str:
        try:
            return self.to_sql()[0]
        except SQLComposeError:
            return repr(self)
