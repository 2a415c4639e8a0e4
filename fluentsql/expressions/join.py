"""JOIN clause."""

import enum
from typing import Any

from pydantic import field_validator

from ..exceptions import InvalidArgumentError
from ..utils.ensure_string import ensure_string
from ._bases import Expression
from .alias import Alias
from .composite import CompositeExpression


class JoinType(str, enum.Enum):
    INNER = "INNER"
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class Join(Expression):
    """``<KIND> JOIN <table> ON <condition>``; table may be an Alias."""

    kind: JoinType = JoinType.INNER
    table: str | Alias
    condition: str | CompositeExpression

    @field_validator("kind", mode="before")
    @classmethod
    def _normalize_kind(cls, value: Any) -> Any:
        if isinstance(value, JoinType):
            return value
        try:
            return JoinType(value.strip().upper())
        except (AttributeError, ValueError):
            raise InvalidArgumentError("Join.kind", "'INNER', 'LEFT' or 'RIGHT'", value) from None

    @field_validator("table", mode="before")
    @classmethod
    def _validate_table(cls, value: Any) -> Any:
        if isinstance(value, Alias):
            return value
        return ensure_string("Join.table", value)

    @field_validator("condition", mode="before")
    @classmethod
    def _validate_condition(cls, value: Any) -> Any:
        if isinstance(value, CompositeExpression):
            return value
        return ensure_string("Join.condition", value)

    @property
    def sql(self) -> str:
        return f"{self.kind.value} JOIN {self.table} ON {self.condition}"
