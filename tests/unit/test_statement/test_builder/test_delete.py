"""Unit tests for DeleteBuilder functionality.

This module tests the DeleteBuilder including:
- Basic DELETE statement construction
- Section order and skipping of empty sections
- WHERE accumulation, parenthesization and replacement
- Multi-table deletes (alias, USING, joins)
- LIMIT / OFFSET presence flags
- Validation errors
"""

import pytest

from sqlcompose.exceptions import MissingTableError, MissingWhereConditionError, SQLBuilderError
from sqlcompose.statement.builder import DeleteBuilder, new_delete_builder
from sqlcompose.statement.clause import And, Eq, Or, Raw


# Test basic DELETE construction
def test_delete_builder_initialization() -> None:
    builder = DeleteBuilder()
    assert isinstance(builder, DeleteBuilder)
    assert not builder._tables
    assert not builder._wheres
    assert builder._has_limit is False
    assert builder._has_offset is False


def test_new_delete_builder_returns_empty_builder() -> None:
    assert isinstance(new_delete_builder(), DeleteBuilder)


@pytest.mark.parametrize(
    "method,args",
    [
        ("table", ("users",)),
        ("where", ("id = ?", 1)),
        ("prefix", ("WITH x AS (SELECT 1)",)),
        ("options", ("QUICK",)),
        ("alias", ("u",)),
        ("using", ("sessions",)),
        ("join", ("INNER JOIN", "t", "ON 1 = 1")),
        ("left_join", ("t", "ON 1 = 1")),
        ("right_join", ("t", "ON 1 = 1")),
        ("order_by", ("id",)),
        ("limit", (1,)),
        ("offset", (1,)),
        ("suffix", ("RETURNING id",)),
    ],
)
def test_delete_mutators_return_self(method: str, args: tuple) -> None:
    """Test that every mutator returns the builder for chaining."""
    builder = DeleteBuilder()
    assert getattr(builder, method)(*args) is builder


def test_delete_end_to_end() -> None:
    sql, args = DeleteBuilder().table("users").where("id = ?", 5).limit(1).to_sql()
    assert sql == "DELETE FROM `users` WHERE id = ? LIMIT 1"
    assert args == [5]


@pytest.mark.parametrize("table", ["users", "order_items", "t"])
@pytest.mark.parametrize(
    "where,where_args",
    [("id = ?", (1,)), ("a = ? OR b = ?", ("x", "y")), ("deleted = 1", ())],
    ids=["one_arg", "or", "no_args"],
)
def test_delete_minimal_statement(table: str, where: str, where_args: tuple) -> None:
    """Test that table plus a single WHERE renders exactly that and nothing else."""
    sql, args = DeleteBuilder().table(table).where(where, *where_args).to_sql()
    assert sql == f"DELETE FROM `{table}` WHERE {where}"
    assert args == list(where_args)


def test_delete_table_with_alias_words() -> None:
    sql, _ = DeleteBuilder().table("users", "AS", "u").where("u.id = ?", 1).to_sql()
    assert sql == "DELETE FROM `users` AS u WHERE u.id = ?"


def test_delete_full_section_order() -> None:
    """Test that every populated section appears in the fixed order."""
    builder = (
        DeleteBuilder()
        .suffix("RETURNING id")
        .offset(10)
        .limit(5)
        .order_by("created_at DESC", "id")
        .where("u.kind = ?", "guest")
        .left_join("sessions", "AS s ON s.user_id = u.id AND s.expired = ?", True)
        .using("accounts")
        .table("users", "u")
        .alias("u")
        .options("LOW_PRIORITY", "QUICK")
        .prefix("/* tag = ? */", "cleanup")
    )
    sql, args = builder.to_sql()
    assert sql == (
        "/* tag = ? */ DELETE LOW_PRIORITY QUICK u FROM `users` u USING accounts"
        " LEFT JOIN `sessions` AS s ON s.user_id = u.id AND s.expired = ?"
        " WHERE u.kind = ? ORDER BY created_at DESC, id LIMIT 5 OFFSET 10 RETURNING id"
    )
    assert args == ["cleanup", True, "guest"]


def test_delete_multiple_tables_and_aliases() -> None:
    sql, _ = (
        DeleteBuilder()
        .alias("a", "b")
        .table("alpha", "a")
        .table("beta", "b")
        .where("a.id = b.alpha_id")
        .to_sql()
    )
    assert sql == "DELETE a, b FROM `alpha` a, `beta` b WHERE a.id = b.alpha_id"


def test_delete_join_args_follow_all_join_text() -> None:
    """Test that join arguments are appended after every join, before WHERE arguments."""
    sql, args = (
        DeleteBuilder()
        .table("users", "u")
        .join("INNER JOIN", "orders", "o ON o.user_id = u.id AND o.state = ?", "open")
        .right_join("notes", "n ON n.user_id = u.id AND n.kind = ?", "spam")
        .where("u.id > ?", 100)
        .to_sql()
    )
    assert sql == (
        "DELETE FROM `users` u INNER JOIN `orders` o ON o.user_id = u.id AND o.state = ?"
        " RIGHT JOIN `notes` n ON n.user_id = u.id AND n.kind = ? WHERE u.id > ?"
    )
    assert args == ["open", "spam", 100]


def test_delete_join_without_suffix() -> None:
    sql, _ = DeleteBuilder().table("a").join("NATURAL JOIN", "b").where("1 = 1").to_sql()
    assert sql == "DELETE FROM `a` NATURAL JOIN `b` WHERE 1 = 1"


# Test WHERE handling
def test_delete_multiple_where_fragments_are_parenthesized() -> None:
    sql, args = (
        DeleteBuilder()
        .table("users")
        .where("status = ? OR status = ?", "banned", "deleted")
        .where("AND created_at < ?", "2020-01-01")
        .to_sql()
    )
    assert sql == "DELETE FROM `users` WHERE (status = ? OR status = ?) (AND created_at < ?)"
    assert args == ["banned", "deleted", "2020-01-01"]


def test_delete_single_where_fragment_is_not_parenthesized() -> None:
    sql, _ = DeleteBuilder().table("users").where("a = ? OR b = ?", 1, 2).to_sql()
    assert sql.endswith("WHERE a = ? OR b = ?")


def test_delete_where_clause_replaces_previous_fragments() -> None:
    """Test that where_clause discards every earlier WHERE fragment."""
    builder = DeleteBuilder().table("users").where("a = ?", 1).where("b = ?", 2)
    builder.where_clause(And(Eq("c", 3), Or(Eq("d", 4), Raw("e IS NULL"))))

    sql, args = builder.to_sql()
    assert sql == "DELETE FROM `users` WHERE (c = ?) AND ((d = ?) OR (e IS NULL))"
    assert args == [3, 4]


def test_delete_where_clause_with_empty_clause_keeps_fragments() -> None:
    builder = DeleteBuilder().table("users").where("a = ?", 1).where_clause(And())
    assert builder.to_sql() == ("DELETE FROM `users` WHERE a = ?", [1])


def test_delete_where_after_where_clause_appends() -> None:
    builder = DeleteBuilder().table("users").where_clause(Eq("a", 1)).where("b = ?", 2)
    assert builder.to_sql() == ("DELETE FROM `users` WHERE (a = ?) (b = ?)", [1, 2])


# Test LIMIT / OFFSET
def test_delete_limit_zero_is_rendered() -> None:
    sql, _ = DeleteBuilder().table("users").where("1 = 1").limit(0).to_sql()
    assert sql.endswith(" LIMIT 0")


def test_delete_without_limit_has_no_limit() -> None:
    sql, _ = DeleteBuilder().table("users").where("1 = 1").to_sql()
    assert "LIMIT" not in sql
    assert "OFFSET" not in sql


def test_delete_offset_zero_is_rendered() -> None:
    sql, _ = DeleteBuilder().table("users").where("1 = 1").offset(0).to_sql()
    assert sql.endswith(" OFFSET 0")


def test_delete_limit_last_call_wins() -> None:
    sql, _ = DeleteBuilder().table("users").where("1 = 1").limit(10).limit(2).to_sql()
    assert sql.endswith(" LIMIT 2")


@pytest.mark.parametrize("method", ["limit", "offset"])
def test_delete_negative_limit_offset_rejected(method: str) -> None:
    with pytest.raises(SQLBuilderError, match="must not be negative"):
        getattr(DeleteBuilder(), method)(-1)


# Test validation
def test_delete_without_table_fails() -> None:
    with pytest.raises(MissingTableError, match="delete statements must specify a table"):
        DeleteBuilder().where("id = ?", 1).to_sql()


def test_delete_without_where_fails() -> None:
    """Test the guard against unconditional deletes."""
    builder = DeleteBuilder().table("users").order_by("id").limit(1).suffix("RETURNING id")
    with pytest.raises(MissingWhereConditionError, match="delete statements must have WHERE condition"):
        builder.to_sql()


def test_delete_table_checked_before_where() -> None:
    with pytest.raises(MissingTableError):
        DeleteBuilder().to_sql()


def test_delete_render_is_idempotent() -> None:
    builder = DeleteBuilder().table("users").where("a = ?", 1).where("b = ?", 2).limit(3)
    first = builder.to_sql()
    second = builder.to_sql()
    assert first == second
    assert first[1] is not second[1]


def test_delete_str_and_build() -> None:
    builder = DeleteBuilder().table("users").where("id = ?", 7)
    assert str(builder) == "DELETE FROM `users` WHERE id = ?"
    built = builder.build()
    assert built.sql == "DELETE FROM `users` WHERE id = ?"
    assert built.parameters == [7]
    assert built.as_tuple() == ("DELETE FROM `users` WHERE id = ?", [7])
