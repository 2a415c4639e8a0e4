"""LIMIT / OFFSET clause."""

from typing import Any, Optional

from pydantic import field_validator

from ..exceptions import InvalidArgumentError
from ._bases import Expression


def _non_negative_int(method: str, value: Any) -> int:
    # bool is an int subclass but never a meaningful row count
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidArgumentError(method, "a non-negative integer", value)
    return value


class Limit(Expression):
    """Maximum number of rows, with an optional number of rows to skip."""

    count: int
    offset: Optional[int] = None

    @field_validator("count", mode="before")
    @classmethod
    def _validate_count(cls, value: Any) -> int:
        return _non_negative_int("Limit.count", value)

    @field_validator("offset", mode="before")
    @classmethod
    def _validate_offset(cls, value: Any) -> Optional[int]:
        if value is None:
            return None
        return _non_negative_int("Limit.offset", value)

    @property
    def sql(self) -> str:
        if self.offset is None:
            return f"LIMIT {self.count}"
        return f"LIMIT {self.count} OFFSET {self.offset}"
