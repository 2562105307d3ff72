"""sqlcompose: composable, parameterized SQL statement builders."""

from sqlcompose import driver, exceptions, statement, utils
from sqlcompose.__metadata__ import __version__
from sqlcompose.config import StatementConfig
from sqlcompose.driver import DBAPIPreparer, execute, query
from sqlcompose.exceptions import (
    ClauseRenderError,
    ExtraParameterError,
    MissingParameterError,
    MissingRequiredColumnsError,
    MissingTableError,
    MissingWhereConditionError,
    ParameterError,
    SQLBuilderError,
    SQLComposeError,
)
from sqlcompose.protocols import PreparedStatement, StatementPreparer
from sqlcompose.statement import (
    And,
    BuiltStatement,
    Clause,
    CompositeClause,
    DeleteBuilder,
    Eq,
    Expression,
    ExpressionList,
    InsertBuilder,
    Or,
    Raw,
    SelectBuilder,
    SetClause,
    SetExprClause,
    UpdateBuilder,
    WhereExpressionList,
)
from sqlcompose.statement.builder import (
    new_delete_builder,
    new_insert_builder,
    new_select_builder,
    new_update_builder,
)

__all__ = (
    "And",
    "BuiltStatement",
    "Clause",
    "ClauseRenderError",
    "CompositeClause",
    "DBAPIPreparer",
    "DeleteBuilder",
    "Eq",
    "Expression",
    "ExpressionList",
    "ExtraParameterError",
    "InsertBuilder",
    "MissingParameterError",
    "MissingRequiredColumnsError",
    "MissingTableError",
    "MissingWhereConditionError",
    "Or",
    "ParameterError",
    "PreparedStatement",
    "Raw",
    "SQLBuilderError",
    "SQLComposeError",
    "SelectBuilder",
    "SetClause",
    "SetExprClause",
    "StatementConfig",
    "StatementPreparer",
    "UpdateBuilder",
    "WhereExpressionList",
    "__version__",
    "driver",
    "exceptions",
    "execute",
    "new_delete_builder",
    "new_insert_builder",
    "new_select_builder",
    "new_update_builder",
    "query",
    "statement",
    "utils",
)
