"""Tests for fluentsql.statements.insert."""

import pytest

from fluentsql.exceptions import InvalidArgumentError
from fluentsql.statements import Insert


def test_insert_values(qb):
    stmt = qb.insert("users").values({"name": ":name", "username": ":username"})
    assert stmt.get_sql_string() == "INSERT INTO users (name, username) VALUES (:name, :username)"


def test_insert_value_by_value():
    stmt = Insert().into("users").value("name", ":name").value("age", 42)
    assert stmt.get_sql_string() == "INSERT INTO users (name, age) VALUES (:name, 42)"


def test_insert_same_column_twice_keeps_first_position_and_last_value():
    stmt = Insert().into("users").value("name", ":a").value("age", ":b").value("name", ":c")
    assert stmt.get_sql_string() == "INSERT INTO users (name, age) VALUES (:c, :b)"


def test_values_replaces_previous_pairs():
    stmt = Insert().into("users").value("a", 1).values({"b": 2})
    assert stmt.get_sql_string() == "INSERT INTO users (b) VALUES (2)"


def test_insert_with_alias():
    stmt = Insert().into("users", "u").value("u.name", ":name")
    assert stmt.get_sql_string() == "INSERT INTO users AS u (u.name) VALUES (:name)"


def test_insert_without_values():
    assert Insert().into("users").get_sql_string() == "INSERT INTO users"


def test_insert_validates_arguments():
    with pytest.raises(InvalidArgumentError, match="Insert.into"):
        Insert().into(1)
    with pytest.raises(InvalidArgumentError, match="Insert.values"):
        Insert().into("users").values([("a", 1)])
    with pytest.raises(InvalidArgumentError, match="Insert.values"):
        Insert().into("users").values({1: "a"})
    with pytest.raises(InvalidArgumentError, match="Insert.value"):
        Insert().into("users").value(None, 1)


def test_insert_without_table_raises_on_render():
    with pytest.raises(ValueError, match="no table"):
        Insert().value("a", 1).get_sql_string()
