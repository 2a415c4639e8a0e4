"""Helpers turning comparisons, aggregates and logical groups into SQL fragments.

Every comparison helper returns a plain condition string, with the value
emitted verbatim: pass a placeholder (``":age"``) or an already-quoted
literal. ``and_x``/``or_x`` return a new ``CompositeExpression``; merging it
into a statement's WHERE clause is the statement's job.

Example:
    expr = qb.expr()
    qb.select("u.name").from_("users", "u").where(
        expr.or_x(expr.eq("u.gender", ":gender"), expr.gte("u.age", ":age"))
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable

from .exceptions import CollectionTraversalError, InvalidArgumentError, UnexpectedResultError
from .expressions import CompositeExpression, CompositeType
from .utils.is_renderable import is_renderable

if TYPE_CHECKING:
    from .query_builder import QueryBuilder


class ExpressionBuilder:
    """Stateless factory of SQL fragments; keeps its QueryBuilder only to build subqueries."""

    def __init__(self, query_builder: "QueryBuilder"):
        self.query_builder = query_builder

    # logical groups

    def and_x(self, *expressions: str | CompositeExpression) -> CompositeExpression:
        """Group expressions in a logical AND relation."""
        return CompositeExpression(operator=CompositeType.AND, children=list(expressions))

    def or_x(self, *expressions: str | CompositeExpression) -> CompositeExpression:
        """Group expressions in a logical OR relation."""
        return CompositeExpression(operator=CompositeType.OR, children=list(expressions))

    # comparisons

    def eq(self, name: str, value: Any) -> str:
        return f"{name} = {value}"

    def neq(self, name: str, value: Any) -> str:
        return f"{name} <> {value}"

    def gt(self, name: str, value: Any) -> str:
        return f"{name} > {value}"

    def gte(self, name: str, value: Any) -> str:
        return f"{name} >= {value}"

    def lt(self, name: str, value: Any) -> str:
        return f"{name} < {value}"

    def lte(self, name: str, value: Any) -> str:
        return f"{name} <= {value}"

    def between(self, value: Any, lower: Any, upper: Any) -> str:
        return f"{value} BETWEEN {lower} AND {upper}"

    def is_null(self, name: str) -> str:
        return f"{name} IS NULL"

    def is_not_null(self, name: str) -> str:
        return f"{name} IS NOT NULL"

    # aggregates

    @staticmethod
    def _function(symbol: str, values: tuple[Any, ...]) -> str:
        """Render ``SYMBOL(a, b)`` from variadic arguments or from a single list or tuple of them."""
        method = f"ExpressionBuilder.{symbol.lower()}"
        if len(values) == 1 and isinstance(values[0], (list, tuple)):
            values = tuple(values[0])
        if not values:
            raise InvalidArgumentError(method, "at least one column or expression", values)
        return f"{symbol}({', '.join(map(str, values))})"

    def avg(self, *values: Any) -> str:
        return self._function("AVG", values)

    def sum(self, *values: Any) -> str:
        return self._function("SUM", values)

    def max(self, *values: Any) -> str:
        return self._function("MAX", values)

    def min(self, *values: Any) -> str:
        return self._function("MIN", values)

    def count(self, name: str) -> str:
        return f"COUNT({name})"

    # membership

    def in_(self, name: str, values: Iterable[Any] | Callable[["QueryBuilder"], Any]) -> str:
        """Build ``<name> IN (...)`` from literal values, a statement or a subquery callback.

        The callback receives the query builder and must return a statement
        (anything with ``get_sql_string()``), e.g.::

            expr.in_("u.age", lambda qb: qb.select("e.age").from_("employees", "e"))
        """
        return self._membership("IN", name, values, "ExpressionBuilder.in_")

    def not_in(self, name: str, values: Iterable[Any] | Callable[["QueryBuilder"], Any]) -> str:
        """Build ``<name> NOT IN (...)``; same arguments as ``in_``."""
        return self._membership("NOT IN", name, values, "ExpressionBuilder.not_in")

    def _membership(self, symbol: str, name: str, values: Any, method: str) -> str:
        if is_renderable(values):
            items = [values.get_sql_string()]
        elif callable(values):
            items = [self.create_subquery(values, method)]
        elif isinstance(values, (str, bytes)) or not isinstance(values, Iterable):
            raise CollectionTraversalError(method, values)
        else:
            items = [str(value) for value in values]
            if not items:
                raise InvalidArgumentError(method, "a non-empty collection", values)
        fragment = f"{symbol} ({', '.join(items)})"
        return f"{name} {fragment}" if name else fragment

    def create_subquery(
        self,
        callback: Callable[["QueryBuilder"], Any],
        method: str = "ExpressionBuilder.create_subquery",
    ) -> str:
        """Invoke callback with the query builder and return the SQL of the statement it returns.

        Raises:
            UnexpectedResultError: If the callback does not return a statement.
        """
        statement = callback(self.query_builder)
        if not is_renderable(statement):
            raise UnexpectedResultError(method, "a statement with get_sql_string()", statement)
        return statement.get_sql_string()
