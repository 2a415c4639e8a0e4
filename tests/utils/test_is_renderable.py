"""Tests for fluentsql.utils.is_renderable."""

from fluentsql.statements import Delete, Select
from fluentsql.utils.is_renderable import is_renderable


class _Fake:
    def get_sql_string(self):
        return "SELECT 1"


def test_statements_are_renderable():
    assert is_renderable(Select())
    assert is_renderable(Delete().from_("t"))
    assert is_renderable(_Fake())


def test_classes_and_strings_are_not():
    assert not is_renderable(Select)
    assert not is_renderable("SELECT 1")
    assert not is_renderable(None)
    assert not is_renderable(lambda qb: None)
