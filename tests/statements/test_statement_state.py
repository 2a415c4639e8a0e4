"""Tests for the dirty/clean render cache and the parts protocol shared by all statements."""

import pytest

from fluentsql.statements import Delete, Select, StatementState, Update


def test_new_statement_is_dirty():
    stmt = Select()
    assert stmt.state is StatementState.DIRTY
    assert not stmt.is_clean()


def test_render_marks_clean_and_caches():
    stmt = Select().select("u.name").from_("users", "u")
    first = stmt.get_sql_string()
    assert stmt.is_clean()
    assert stmt.get_sql_string() == first
    assert stmt.sql == first
    assert str(stmt) == first


def test_clean_render_does_not_reassemble():
    stmt = Select().from_("users")
    stmt.get_sql_string()
    # bypass the parts protocol: a clean statement must keep serving its cache
    stmt._parts["from"] = "accounts"
    assert stmt.get_sql_string() == "SELECT * FROM users"
    stmt.limit(1)
    assert stmt.get_sql_string() == "SELECT * FROM accounts LIMIT 1"


@pytest.mark.parametrize(
    "mutate",
    [
        lambda s: s.where("u.id = :id"),
        lambda s: s.and_where("u.id = :id"),
        lambda s: s.or_where("u.id = :id"),
        lambda s: s.order_by("u.id"),
        lambda s: s.add_order_by("u.id", "DESC"),
        lambda s: s.limit(3),
        lambda s: s.select("u.id"),
        lambda s: s.from_("accounts", "a"),
        lambda s: s.group_by("u.age"),
        lambda s: s.having("COUNT(*) > 1"),
        lambda s: s.left_join("orders", "o.user_id = u.id", "o"),
        lambda s: s.distinct(),
    ],
)
def test_every_mutation_marks_dirty_and_changes_render(mutate):
    stmt = Select().select("u.name").from_("users", "u").where("u.active = 1")
    before = stmt.get_sql_string()
    mutate(stmt)
    assert stmt.state is StatementState.DIRTY
    assert stmt.get_sql_string() != before
    assert stmt.is_clean()


def test_same_operator_where_merge_invalidates_cache():
    stmt = Delete().from_("users").where("a")
    assert stmt.get_sql_string() == "DELETE FROM users WHERE a"
    stmt.and_where("b")
    assert stmt.get_sql_string() == "DELETE FROM users WHERE (a AND b)"


def test_parts_protocol():
    stmt = Update().table("users")
    assert stmt.get_part("table") == "users"
    assert stmt.get_part("orderBy") == []
    stmt.add_part("orderBy", "x")
    assert stmt.get_part("orderBy") == ["x"]
    stmt.clear_part("orderBy")
    assert stmt.get_part("orderBy") == []
    assert set(stmt.get_parts()) == {"table", "set", "where", "orderBy", "limit"}
    with pytest.raises(KeyError):
        stmt.add_part("having", "x")
    with pytest.raises(KeyError):
        stmt.clear_part("nope")


def test_parts_are_not_shared_between_instances():
    first = Select().select("a")
    second = Select()
    assert second.get_part("select") == []
    assert first.get_part("select") == ["a"]


def test_execute_without_connection_raises():
    stmt = Select().from_("users")
    with pytest.raises(ValueError, match="not bound to a connection"):
        stmt.execute()
