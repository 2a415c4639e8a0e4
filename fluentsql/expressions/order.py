"""ORDER BY term."""

import enum
from typing import Any

from pydantic import field_validator

from ..exceptions import InvalidArgumentError
from ..utils.ensure_string import ensure_string
from ._bases import Expression


class SortDirection(str, enum.Enum):
    """How rows are sorted on a column."""

    ASC = "ASC"
    DESC = "DESC"

    @classmethod
    def parse(cls, value: Any, method: str = "SortDirection") -> "SortDirection":
        """Return the direction for ``"asc"``, ``"DESC"``, a SortDirection, etc."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().upper())
            except ValueError:
                pass
        raise InvalidArgumentError(method, "'ASC' or 'DESC'", value)


class Order(Expression):
    """One column and ascending or descending."""

    column: str
    direction: SortDirection = SortDirection.ASC

    @field_validator("column", mode="before")
    @classmethod
    def _validate_column(cls, value: Any) -> str:
        return ensure_string("Order.column", value)

    @field_validator("direction", mode="before")
    @classmethod
    def _validate_direction(cls, value: Any) -> SortDirection:
        return SortDirection.parse(value, "Order.direction")

    @property
    def sql(self) -> str:
        """Column with ``ASC`` or ``DESC`` suffix."""
        return f"{self.column} {self.direction.value}"
