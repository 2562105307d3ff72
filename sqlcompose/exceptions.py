from typing import Any, Optional

__all__ = (
    "ClauseRenderError",
    "ExtraParameterError",
    "ImproperConfigurationError",
    "MissingParameterError",
    "MissingRequiredColumnsError",
    "MissingTableError",
    "MissingWhereConditionError",
    "ParameterError",
    "SQLBuilderError",
    "SQLComposeError",
)


class SQLComposeError(Exception):
    """Base exception class from which all sqlcompose exceptions inherit."""

    detail: str

    def __init__(self, *args: Any, detail: str = "") -> None:
        """Initialize ``SQLComposeError``.

        Args:
            *args: args are converted to :class:`str` before passing to :class:`Exception`
            detail: detail of the exception.
        """
        str_args = [str(arg) for arg in args if arg]
        if not detail:
            if str_args:
                detail, *str_args = str_args
            elif hasattr(self, "detail"):
                detail = self.detail
        self.detail = detail
        super().__init__(*str_args)

    def __repr__(self) -> str:
        if self.detail:
            return f"{self.__class__.__name__} - {self.detail}"
        return self.__class__.__name__

    def __str__(self) -> str:
        return " ".join((*self.args, self.detail)).strip()


class ImproperConfigurationError(SQLComposeError):
    """Improper Configuration error."""


class SQLBuilderError(SQLComposeError):
    """Issues Building or Generating SQL statements."""

    def __init__(self, message: Optional[str] = None) -> None:
        if message is None:
            message = "Issues building SQL statement."
        super().__init__(message)


class MissingTableError(SQLBuilderError):
    """Raised when a statement is rendered without a target table."""


class MissingRequiredColumnsError(SQLBuilderError):
    """Raised when a statement is rendered without the columns it requires.

    For UPDATE this means no SET assignment was given.
    """


class MissingWhereConditionError(SQLBuilderError):
    """Raised when a DELETE or UPDATE is rendered without a WHERE condition.

    Callers that really want to touch every row must pass an explicit
    always-true fragment such as ``where("1 = 1")``.
    """


class ClauseRenderError(SQLBuilderError):
    """Raised when a clause cannot render itself."""


# -- SQL Parameter Errors --
class ParameterError(SQLComposeError):
    """Base class for parameter-related errors."""

    sql: Optional[str]

    def __init__(self, message: str, sql: Optional[str] = None) -> None:
        """Initialize with optional SQL context."""
        detail_message = message
        if sql:
            detail_message = f"{message}\nSQL: {sql}"
        super().__init__(detail=detail_message)
        self.sql = sql


class MissingParameterError(ParameterError):
    """Raised when there are fewer arguments than placeholders."""


class ExtraParameterError(ParameterError):
    """Raised when there are more arguments than placeholders."""
