"""Entry point creating statements bound to a connection."""

from __future__ import annotations

from typing import Any, Optional

from .expression_builder import ExpressionBuilder
from .statements import Delete, Insert, Select, Update


class QueryBuilder:
    """Creates SELECT/INSERT/UPDATE/DELETE statements sharing one connection.

    Example:
        qb = QueryBuilder(get_connection())
        stmt = qb.select("u.name").from_("users", "u").where("u.is_active = :active")
        rows = stmt.execute({"active": 1}).fetch_all()
    """

    def __init__(self, connection: Optional[Any] = None):
        self.connection = connection
        self._expression_builder: Optional[ExpressionBuilder] = None

    def select(self, *columns: str) -> Select:
        """Create a Select statement for the given columns (none means ``*``)."""
        return Select(connection=self.connection).select(*columns)

    def raw_select(self, expression: str) -> Select:
        """Create a Select statement projecting one raw, vendor-specific expression."""
        return Select(connection=self.connection).raw_select(expression)

    def insert(self, table: str, alias: str = "") -> Insert:
        return Insert(connection=self.connection).into(table, alias)

    def update(self, table: str, alias: str = "") -> Update:
        return Update(connection=self.connection).table(table, alias)

    def delete(self, table: str, alias: str = "") -> Delete:
        return Delete(connection=self.connection).from_(table, alias)

    def expr(self) -> ExpressionBuilder:
        """Return the expression builder (created on first call, then reused)."""
        if self._expression_builder is None:
            self._expression_builder = ExpressionBuilder(self)
        return self._expression_builder
