"""Call-time validation of identifier arguments (table, column and alias names)."""

from typing import Any

from ..exceptions import InvalidArgumentError


def ensure_string(method: str, value: Any, allow_empty: bool = False) -> str:
    """Return value unchanged if it is a string, else raise InvalidArgumentError naming method.

    Empty strings are rejected unless allow_empty is True.
    """
    if not isinstance(value, str):
        raise InvalidArgumentError(method, "a string argument", value)
    if not value and not allow_empty:
        raise InvalidArgumentError(method, "a non-empty string argument", value)
    return value
