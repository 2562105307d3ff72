"""Protocols for the execution collaborator consumed by the builders."""

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable

__all__ = ("PreparedStatement", "StatementPreparer")


@runtime_checkable
class PreparedStatement(Protocol):
    """A statement prepared against a database handle."""

    def execute(self, args: "Sequence[Any]") -> Any:
        """Run the statement for its side effects."""
        ...

    def query(self, args: "Sequence[Any]") -> Any:
        """Run the statement and return its rows."""
        ...

    def close(self) -> None:
        """Release the prepared handle."""
        ...


@runtime_checkable
class StatementPreparer(Protocol):
    """Anything that can prepare SQL text, e.g. a connection or transaction."""

    def prepare(self, sql: str) -> PreparedStatement:
        """Prepare ``sql`` for execution."""
        ...
