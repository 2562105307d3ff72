"""Statement composition: expressions, clauses and builders."""

from sqlcompose.statement.builder import (
    BuiltStatement,
    DeleteBuilder,
    InsertBuilder,
    SelectBuilder,
    StatementBuilder,
    UpdateBuilder,
)
from sqlcompose.statement.clause import And, Clause, CompositeClause, Eq, Or, Raw, SetClause, SetExprClause
from sqlcompose.statement.expression import Expression, ExpressionList, WhereExpressionList

__all__ = (
    "And",
    "BuiltStatement",
    "Clause",
    "CompositeClause",
    "DeleteBuilder",
    "Eq",
    "Expression",
    "ExpressionList",
    "InsertBuilder",
    "Or",
    "Raw",
    "SelectBuilder",
    "SetClause",
    "SetExprClause",
    "StatementBuilder",
    "UpdateBuilder",
    "WhereExpressionList",
)
