"""Mixins for Statement: WHERE/HAVING merging, ORDER BY and LIMIT."""

from __future__ import annotations

from typing import Any, Optional

from ..exceptions import InvalidArgumentError
from ..expressions import CompositeExpression, CompositeType, Limit, Order, SortDirection
from .base import Statement


def _check_clauses(method: str, clauses: tuple[Any, ...]) -> list[Any]:
    """Validate variadic clauses: each must be a condition string or a composite."""
    for clause in clauses:
        if not isinstance(clause, (str, CompositeExpression)):
            raise InvalidArgumentError(method, "a string or CompositeExpression clause", clause)
    return list(clauses)


class _WithCompositeParts(Statement):
    """Merging of clauses into a part holding a single CompositeExpression root."""

    def _merge_composite(self, part: str, clauses: list[Any], operator: CompositeType) -> None:
        """Combine clauses with the part's current root.

        - no root yet: a fresh composite with the requested operator
        - root with the same operator: clauses appended to it in place
        - root with another operator: a new root whose first child is the old root
        """
        root = self.get_part(part)
        if root is None:
            self.add_part(part, CompositeExpression(operator=operator, children=clauses), append=False)
        elif root.operator is operator:
            root.add_all(clauses)
            self._mark_dirty()
        else:
            self.add_part(
                part,
                CompositeExpression(operator=operator, children=[root, *clauses]),
                append=False,
            )


class _WithWhere(_WithCompositeParts):
    """WHERE clause; requires a ``where`` part (None when empty)."""

    def where(self, *clauses: str | CompositeExpression):
        """Replace any previous restrictions with clauses, ANDed together.

        Example:
            stmt.where("u.is_active = :active", "u.age > :age")
        """
        checked = _check_clauses(f"{type(self).__name__}.where", clauses)
        self.clear_part("where")
        self._merge_composite("where", checked, CompositeType.AND)
        return self

    def and_where(self, *clauses: str | CompositeExpression):
        """Add restrictions in a logical AND relation with the previous ones."""
        checked = _check_clauses(f"{type(self).__name__}.and_where", clauses)
        self._merge_composite("where", checked, CompositeType.AND)
        return self

    def or_where(self, *clauses: str | CompositeExpression):
        """Add restrictions in a logical OR relation with the previous ones."""
        checked = _check_clauses(f"{type(self).__name__}.or_where", clauses)
        self._merge_composite("where", checked, CompositeType.OR)
        return self

    def _sql_where(self) -> str:
        where = self.get_part("where")
        if where is None or where.is_empty():
            return ""
        return f"WHERE {where.sql} "


class _WithOrderBy(Statement):
    """ORDER BY clause; requires an ``orderBy`` list part."""

    def order_by(self, column: str, direction: str | SortDirection = SortDirection.ASC):
        """Order by column, removing any previous ordering."""
        order = Order(column=column, direction=direction)
        self.clear_part("orderBy")
        self.add_part("orderBy", order)
        return self

    def add_order_by(self, column: str, direction: str | SortDirection = SortDirection.ASC):
        """Append an ordering term after the existing ones."""
        self.add_part("orderBy", Order(column=column, direction=direction))
        return self

    def _sql_order_by(self) -> str:
        orders = self.get_part("orderBy")
        if not orders:
            return ""
        return "ORDER BY " + ", ".join(order.sql for order in orders) + " "


class _WithLimit(Statement):
    """LIMIT clause; requires a ``limit`` part."""

    def limit(self, count: Optional[int] = None, offset: Optional[int] = None):
        """Limit the number of rows; ``None`` removes any previously set limit."""
        if count is None:
            if offset is not None:
                raise InvalidArgumentError(
                    f"{type(self).__name__}.limit", "a row count when an offset is given", count
                )
            self.clear_part("limit")
            return self
        self.add_part("limit", Limit(count=count, offset=offset), append=False)
        return self

    def _sql_limit(self) -> str:
        limit = self.get_part("limit")
        if limit is None:
            return ""
        return limit.sql
