from dataclasses import dataclass, field
from io import StringIO

from typing_extensions import Self

__all__ = ("OrderByClauseMixin",)


@dataclass(eq=False)
class OrderByClauseMixin:
    """Mixin providing ORDER BY. Items are plain SQL with no bound values."""

    _order_bys: "list[str]" = field(default_factory=list, init=False, repr=False)

    def order_by(self, *items: str) -> Self:
        """Add ORDER BY items, e.g. ``"created_at DESC"``.

        Returns:
            The current builder instance for method chaining.
        """
        self._order_bys.extend(items)
        return self

    def _append_order_by(self, buffer: StringIO) -> None:
        if self._order_bys:
            buffer.write(" ORDER BY ")
            buffer.write(", ".join(self._order_bys))
