"""Placeholder and argument pairing checks."""

from collections.abc import Sequence
from typing import Any

import sqlglot
from sqlglot.errors import TokenError
from sqlglot.tokens import TokenType

from sqlcompose.exceptions import ExtraParameterError, MissingParameterError, ParameterError

__all__ = ("count_placeholders", "validate_parameters")


def count_placeholders(sql: str) -> int:
    """Count ``?`` placeholders in ``sql``.

    The text is tokenized with the MySQL dialect, so question marks inside
    string literals or quoted identifiers are not counted.

    Raises:
        ParameterError: If the SQL cannot be tokenized.

    Returns:
        The number of positional placeholders.
    """
    try:
        tokens = sqlglot.tokenize(sql, read="mysql")
    except TokenError as e:
        msg = f"Could not tokenize SQL to count placeholders: {e}"
        raise ParameterError(msg, sql) from e
    return sum(1 for token in tokens if token.token_type == TokenType.PLACEHOLDER)


def validate_parameters(sql: str, args: "Sequence[Any]") -> None:
    """Check that ``args`` holds exactly one value per placeholder in ``sql``.

    Raises:
        MissingParameterError: Fewer arguments than placeholders.
        ExtraParameterError: More arguments than placeholders.
    """
    expected = count_placeholders(sql)
    if len(args) < expected:
        msg = f"SQL expects {expected} parameters but {len(args)} were provided"
        raise MissingParameterError(msg, sql)
    if len(args) > expected:
        msg = f"SQL expects {expected} parameters but {len(args)} were provided"
        raise ExtraParameterError(msg, sql)
