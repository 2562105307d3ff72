"""Rendering configuration shared by the statement builders."""

from dataclasses import dataclass

from sqlcompose.exceptions import ImproperConfigurationError

__all__ = ("DEFAULT_CONFIG", "StatementConfig")


@dataclass(frozen=True)
class StatementConfig:
    """Configuration for statement rendering."""

    identifier_quote: str = "`"
    """Character wrapped around table names passed to ``table()``/``from_()``."""

    validate_parameters: bool = False
    """Whether ``to_sql()`` checks that placeholders and arguments pair up."""

    def __post_init__(self) -> None:
        if len(self.identifier_quote) > 1:
            msg = f"identifier_quote must be a single character, got {self.identifier_quote!r}"
            raise ImproperConfigurationError(msg)

    def quote(self, identifier: str) -> str:
        return f"{self.identifier_quote}{identifier}{self.identifier_quote}"


DEFAULT_CONFIG = StatementConfig()
