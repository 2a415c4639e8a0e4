"""Aliased identifier (``users AS u``)."""

from typing import Any

from pydantic import field_validator

from ..utils.ensure_string import ensure_string
from ._bases import Expression


class Alias(Expression):
    """A table or column together with the name it is referred to by."""

    target: str
    name: str

    @field_validator("target", mode="before")
    @classmethod
    def _validate_target(cls, value: Any) -> str:
        return ensure_string("Alias.target", value)

    @field_validator("name", mode="before")
    @classmethod
    def _validate_name(cls, value: Any) -> str:
        return ensure_string("Alias.name", value)

    @property
    def sql(self) -> str:
        return f"{self.target} AS {self.name}"
