"""Base expression type for SQL fragments."""

from __future__ import annotations

from pydantic import BaseModel


class Expression(BaseModel):
    """Base type for every renderable SQL fragment.

    Subclasses must implement the ``sql`` property. ``str(expression)`` is the
    same text, so expressions can be dropped into f-strings and ``", ".join``.
    """

    model_config = {"arbitrary_types_allowed": True}

    @property
    def sql(self) -> str:
        """SQL text for this fragment."""
        raise NotImplementedError("Subclasses must implement `sql` property")

    def __str__(self) -> str:
        return self.sql
