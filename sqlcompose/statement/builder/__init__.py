"""Fluent builders for DELETE, UPDATE, SELECT and INSERT statements.

Each builder collects SQL fragments and their bound values, then renders them
in a fixed section order into SQL with ``?`` placeholders and one flat
argument list.
"""

from sqlcompose.exceptions import SQLBuilderError
from sqlcompose.statement.builder._base import BuiltStatement, StatementBuilder
from sqlcompose.statement.builder._delete import DeleteBuilder, new_delete_builder
from sqlcompose.statement.builder._insert import InsertBuilder, new_insert_builder
from sqlcompose.statement.builder._select import SelectBuilder, new_select_builder
from sqlcompose.statement.builder._update import UpdateBuilder, new_update_builder
from sqlcompose.statement.builder.mixins import WhereClauseMixin

__all__ = (
    "BuiltStatement",
    "DeleteBuilder",
    "InsertBuilder",
    "SQLBuilderError",
    "SelectBuilder",
    "StatementBuilder",
    "UpdateBuilder",
    "WhereClauseMixin",
    "new_delete_builder",
    "new_insert_builder",
    "new_select_builder",
    "new_update_builder",
)
