from dataclasses import dataclass, field
from io import StringIO

from typing_extensions import Self

from sqlcompose.exceptions import SQLBuilderError

__all__ = ("LimitOffsetClauseMixin",)


@dataclass(eq=False)
class LimitOffsetClauseMixin:
    """Mixin providing LIMIT and OFFSET.

    Each value is paired with a flag recording that it was set, so
    ``limit(0)`` renders ``LIMIT 0`` while a builder whose ``limit`` was
    never called renders no LIMIT at all.
    """

    _limit: int = field(default=0, init=False, repr=False)
    _has_limit: bool = field(default=False, init=False, repr=False)
    _offset: int = field(default=0, init=False, repr=False)
    _has_offset: bool = field(default=False, init=False, repr=False)

    def limit(self, value: int) -> Self:
        """Set LIMIT.

        Args:
            value: The maximum number of rows.

        Raises:
            SQLBuilderError: If ``value`` is negative.

        Returns:
            The current builder instance for method chaining.
        """
        if value < 0:
            msg = f"LIMIT must not be negative, got {value}"
            raise SQLBuilderError(msg)
        self._limit = value
        self._has_limit = True
        return self

    def offset(self, value: int) -> Self:
        """Set OFFSET.

        Args:
            value: The number of rows to skip.

        Raises:
            SQLBuilderError: If ``value`` is negative.

        Returns:
            The current builder instance for method chaining.
        """
        if value < 0:
            msg = f"OFFSET must not be negative, got {value}"
            raise SQLBuilderError(msg)
        self._offset = value
        self._has_offset = True
        return self

    def _append_limit_offset(self, buffer: StringIO) -> None:
        if self._has_limit:
            buffer.write(f" LIMIT {self._limit:d}")
        if self._has_offset:
            buffer.write(f" OFFSET {self._offset:d}")
