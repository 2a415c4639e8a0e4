"""Tests for fluentsql.expressions.composite: children management, rendering, operator immutability."""

import pytest
from pydantic import ValidationError

from fluentsql.exceptions import CollectionTraversalError, InvalidArgumentError
from fluentsql.expressions import CompositeExpression, CompositeType


def _and(*children):
    return CompositeExpression(operator=CompositeType.AND, children=list(children))


def _or(*children):
    return CompositeExpression(operator=CompositeType.OR, children=list(children))


def test_empty_composite_renders_nothing():
    composite = _and()
    assert composite.is_empty()
    assert composite.count() == 0
    assert len(composite) == 0
    assert composite.sql == ""
    assert str(composite) == ""


def test_single_child_has_no_parentheses():
    assert _and("a = 1").sql == "a = 1"
    assert _or("a = 1").sql == "a = 1"


def test_several_children_are_joined_in_one_pair_of_parentheses():
    assert _and("a", "b", "c").sql == "(a AND b AND c)"
    assert _or("a", "b").sql == "(a OR b)"


def test_nested_composites_keep_precedence():
    composite = _or(_and("a", "b"), "c")
    assert composite.sql == "((a AND b) OR c)"
    composite = _and(_or("a"), "b")
    assert composite.sql == "(a AND b)"


def test_add_and_add_all_preserve_order_and_duplicates():
    composite = _and()
    composite.add("a").add_all(["b", "a"])
    composite.add_all(x for x in ("c",))
    assert composite.children == ["a", "b", "a", "c"]
    assert composite.count() == 4
    assert not composite.is_empty()
    assert list(composite) == ["a", "b", "a", "c"]


def test_count_is_not_recursive():
    composite = _and(_or("a", "b", "c"), "d")
    assert composite.count() == 2


def test_clear_keeps_operator():
    composite = _or("a", "b")
    composite.clear()
    assert composite.is_empty()
    assert composite.operator is CompositeType.OR
    composite.add("x")
    assert composite.sql == "x"


def test_add_all_rejects_non_collections():
    composite = _and()
    with pytest.raises(CollectionTraversalError, match="add_all"):
        composite.add_all(42)
    with pytest.raises(CollectionTraversalError):
        composite.add_all("a = 1")
    assert composite.is_empty()


def test_add_rejects_wrong_child_kind():
    composite = _and()
    with pytest.raises(InvalidArgumentError, match="CompositeExpression.add"):
        composite.add(42)
    with pytest.raises(InvalidArgumentError):
        composite.add_all(["a", None])
    # nothing was appended by the failed add_all
    assert composite.is_empty()


def test_constructor_validates_children():
    with pytest.raises(InvalidArgumentError):
        CompositeExpression(operator=CompositeType.AND, children=[1, 2])
    with pytest.raises(CollectionTraversalError):
        CompositeExpression(operator=CompositeType.AND, children=3)


def test_operator_is_parsed_case_insensitively():
    assert CompositeExpression(operator="or", children=["a", "b"]).sql == "(a OR b)"
    with pytest.raises(InvalidArgumentError, match="'AND' or 'OR'"):
        CompositeExpression(operator="xor")


def test_operator_is_frozen():
    composite = _and("a")
    with pytest.raises(ValidationError):
        composite.operator = CompositeType.OR
    assert composite.operator is CompositeType.AND


def test_combining_builds_new_parent():
    left = _and("a", "b")
    combined = left | "c"
    assert combined is not left
    assert combined.operator is CompositeType.OR
    assert combined.children[0] is left
    assert left.operator is CompositeType.AND
    assert combined.sql == "((a AND b) OR c)"
    assert (left & "d").sql == "((a AND b) AND d)"
