"""Duck-typed check for objects that can produce final SQL text."""

from typing import Any


def is_renderable(thing: Any) -> bool:
    """Return True if thing is a statement instance exposing a callable ``get_sql_string``.

    Plain strings and classes are never renderable, even when they happen to
    carry such an attribute.
    """
    if isinstance(thing, (str, bytes, type)):
        return False
    return callable(getattr(thing, "get_sql_string", None))
