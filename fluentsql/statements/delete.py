"""DELETE statement builder."""

from __future__ import annotations

from typing import Any, ClassVar

from .mixins import _WithLimit, _WithOrderBy, _WithWhere


class Delete(_WithWhere, _WithOrderBy, _WithLimit):
    """Fluent DELETE: table, WHERE, ORDER BY, LIMIT."""

    PARTS: ClassVar[dict[str, Any]] = {
        "from": None,
        "where": None,
        "orderBy": [],
        "limit": None,
    }

    def from_(self, table: str, alias: str = "") -> Delete:
        """Set the table whose rows are deleted, replacing any previous one."""
        self.add_part("from", self._table_reference("Delete.from_", table, alias), append=False)
        return self

    def _assemble(self) -> str:
        if self.get_part("from") is None:
            raise ValueError("Delete has no table; call from_() first")
        query = f"DELETE FROM {self.get_part('from')} "
        query += self._sql_where()
        query += self._sql_order_by()
        query += self._sql_limit()
        return query
