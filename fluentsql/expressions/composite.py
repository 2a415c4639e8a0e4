"""Composite (AND / OR) boolean expression tree."""

from __future__ import annotations

import enum
from typing import Any, Iterable, Iterator

from pydantic import Field as PydanticField, field_validator

from ..exceptions import CollectionTraversalError, InvalidArgumentError
from ._bases import Expression


class CompositeType(str, enum.Enum):
    """Logical operator joining the children of a composite."""

    AND = "AND"
    OR = "OR"


def _check_child(method: str, child: Any) -> Any:
    """Accept a condition string or a nested composite; raise InvalidArgumentError otherwise."""
    if isinstance(child, (str, CompositeExpression)):
        return child
    raise InvalidArgumentError(method, "a string or CompositeExpression", child)


def _iterate_children(method: str, elements: Any) -> Iterator[Any]:
    """Yield the validated elements of a collection; strings are not treated as collections."""
    if isinstance(elements, (str, bytes)) or not isinstance(elements, Iterable):
        raise CollectionTraversalError(method, elements)
    for element in elements:
        yield _check_child(method, element)


def _child_sql(child: str | CompositeExpression) -> str:
    if isinstance(child, CompositeExpression):
        return child.sql
    return child


class CompositeExpression(Expression):
    """Ordered children (condition strings or nested composites) joined by one operator.

    The operator is fixed for the node's lifetime: combining a composite with
    a different operator builds a new parent node (see ``__and__``/``__or__``
    and the statements' ``and_where``/``or_where``).

    Rendering rules:
        - no children: empty string
        - one child: the child, without parentheses
        - several children: ``(a AND b AND c)``
    """

    operator: CompositeType = PydanticField(frozen=True)
    children: list[Any] = PydanticField(default_factory=list)

    @field_validator("operator", mode="before")
    @classmethod
    def _normalize_operator(cls, value: Any) -> Any:
        if isinstance(value, CompositeType):
            return value
        try:
            return CompositeType(value.strip().upper())
        except (AttributeError, ValueError):
            raise InvalidArgumentError("CompositeExpression.operator", "'AND' or 'OR'", value) from None

    @field_validator("children", mode="before")
    @classmethod
    def _validate_children(cls, value: Any) -> list[Any]:
        return list(_iterate_children("CompositeExpression", value))

    def add(self, expression: str | CompositeExpression) -> CompositeExpression:
        """Append one child."""
        self.children.append(_check_child("CompositeExpression.add", expression))
        return self

    def add_all(self, expressions: Iterable[str | CompositeExpression]) -> CompositeExpression:
        """Append every element of a collection, in order.

        Raises:
            CollectionTraversalError: If expressions is not iterable (or is a bare string).
            InvalidArgumentError: If an element is neither a string nor a composite.
        """
        # validate everything first so a bad element leaves the composite untouched
        self.children.extend(list(_iterate_children("CompositeExpression.add_all", expressions)))
        return self

    def clear(self) -> None:
        """Remove all children; the operator is kept."""
        self.children.clear()

    def is_empty(self) -> bool:
        return not self.children

    def count(self) -> int:
        """Number of direct children (not recursive)."""
        return len(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.children)

    @property
    def sql(self) -> str:
        if not self.children:
            return ""
        if len(self.children) == 1:
            return _child_sql(self.children[0])
        separator = f" {self.operator.value} "
        return "(" + separator.join(map(_child_sql, self.children)) + ")"

    def __and__(self, other: Any) -> CompositeExpression:
        return CompositeExpression(operator=CompositeType.AND, children=[self, other])

    def __or__(self, other: Any) -> CompositeExpression:
        return CompositeExpression(operator=CompositeType.OR, children=[self, other])
