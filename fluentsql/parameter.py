"""Named statement parameters and their type coercion."""

from __future__ import annotations

import enum
from typing import Any, Optional

from pydantic import BaseModel, field_validator

from .utils.ensure_string import ensure_string


class ParameterType(str, enum.Enum):
    """Type a bound value is converted to before it reaches the driver."""

    STR = "string"
    INT = "int"
    FLOAT = "float"

    @classmethod
    def parse(cls, value: Any) -> "ParameterType":
        """Return the matching type; anything unknown falls back to STR."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.STR


def _to_int(value: Any) -> int:
    try:
        return int(value)
    except ValueError:
        # "3.7" is not an int literal but is a valid number
        return int(float(value))


_CONVERTERS = {
    ParameterType.STR: str,
    ParameterType.INT: _to_int,
    ParameterType.FLOAT: float,
}


class Parameter(BaseModel):
    """A value bound to a named placeholder (``:name``).

    When ``type`` is None the value is passed to the driver unchanged;
    otherwise ``converted_value`` coerces it (lists and tuples element-wise).
    None always stays None so that it reaches the database as NULL. Values
    that cannot be coerced (``"abc"`` with type INT or FLOAT) raise ValueError
    when ``converted_value`` is read, i.e. when the statement is executed;
    they are never silently replaced with 0.
    """

    name: str
    value: Any = ""
    type: Optional[ParameterType] = ParameterType.STR

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        name = ensure_string("Parameter.name", value).lstrip(":")
        return ensure_string("Parameter.name", name)

    @field_validator("type", mode="before")
    @classmethod
    def _validate_type(cls, value: Any) -> Optional[ParameterType]:
        if value is None:
            return None
        return ParameterType.parse(value)

    @property
    def converted_value(self) -> Any:
        return self._convert(self.value)

    def _convert(self, value: Any) -> Any:
        if value is None or self.type is None:
            return value
        if isinstance(value, (list, tuple)):
            return [self._convert(item) for item in value]
        return _CONVERTERS[self.type](value)

    def reset(self) -> None:
        """Restore the empty string value and STR type."""
        self.value = ""
        self.type = ParameterType.STR
