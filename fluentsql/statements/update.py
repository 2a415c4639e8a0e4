"""UPDATE statement builder."""

from __future__ import annotations

from typing import Any, ClassVar

from ..utils.ensure_string import ensure_string
from .mixins import _WithLimit, _WithOrderBy, _WithWhere


class Update(_WithWhere, _WithOrderBy, _WithLimit):
    """Fluent UPDATE: table, SET assignments, WHERE, ORDER BY, LIMIT.

    Setting the same column twice keeps the column's first position among
    the assignments and the last value given.
    """

    PARTS: ClassVar[dict[str, Any]] = {
        "table": None,
        "set": {},
        "where": None,
        "orderBy": [],
        "limit": None,
    }

    def table(self, table: str, alias: str = "") -> Update:
        """Set the table whose rows are updated, replacing any previous one."""
        self.add_part("table", self._table_reference("Update.table", table, alias), append=False)
        return self

    def set(self, column: str, value: Any) -> Update:
        """Assign value (a literal or a placeholder such as ``:name``) to column."""
        ensure_string("Update.set", column)
        assignments = dict(self.get_part("set"))
        assignments[column] = f"{column} = {value}"
        self.add_part("set", assignments, append=False)
        return self

    def _assemble(self) -> str:
        parts = self._parts
        if parts["table"] is None:
            raise ValueError("Update has no table; call table() first")
        query = f"UPDATE {parts['table']} "
        if parts["set"]:
            query += "SET " + ", ".join(parts["set"].values()) + " "
        query += self._sql_where()
        query += self._sql_order_by()
        query += self._sql_limit()
        return query
