"""Exceptions raised by statement builders and expression helpers."""

import reprlib
from typing import Any


def describe_type(value: Any) -> str:
    """Name of the value's type, used in error messages (e.g. ``int``, ``Select``)."""
    return type(value).__name__


class InvalidArgumentError(TypeError):
    """A builder call received a value of the wrong kind (e.g. a non-string table name)."""

    def __init__(self, method: str, expected: str, value: Any):
        self.method = method
        self.expected = expected
        self.value = value
        super().__init__(
            f"{method}: expects {expected}; received {describe_type(value)!r} ({reprlib.repr(value)})"
        )


class CollectionTraversalError(InvalidArgumentError):
    """A collection was expected (list, tuple, generator...) but something else was given."""

    def __init__(self, method: str, value: Any):
        super().__init__(method, "an iterable collection", value)


class UnexpectedResultError(TypeError):
    """A callback returned something other than what the caller relies on."""

    def __init__(self, method: str, expected: str, value: Any):
        self.method = method
        self.expected = expected
        self.value = value
        super().__init__(f"{method}: expects {expected}; received {describe_type(value)!r} instead")


__all__ = [
    "CollectionTraversalError",
    "InvalidArgumentError",
    "UnexpectedResultError",
    "describe_type",
]
