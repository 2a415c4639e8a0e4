"""SELECT statement builder."""

from __future__ import annotations

from typing import Any, ClassVar

from ..expressions import CompositeExpression, CompositeType, Join, JoinType
from ..utils.ensure_string import ensure_string
from .mixins import _WithLimit, _WithOrderBy, _WithWhere, _check_clauses


class Select(_WithWhere, _WithOrderBy, _WithLimit):
    """Fluent SELECT: projection, FROM/JOIN, WHERE, GROUP BY, HAVING, ORDER BY, LIMIT.

    Example:
        Select().select("u.name").from_("users", "u").where("u.is_active = :active")
        # SELECT u.name FROM users AS u WHERE u.is_active = :active
    """

    PARTS: ClassVar[dict[str, Any]] = {
        "distinct": False,
        "select": [],
        "from": None,
        "join": [],
        "where": None,
        "groupBy": [],
        "having": None,
        "orderBy": [],
        "limit": None,
    }

    # --- projection ---

    def _check_columns(self, method: str, columns: tuple[Any, ...]) -> list[str]:
        return [ensure_string(f"Select.{method}", column) for column in columns]

    def select(self, *columns: str) -> Select:
        """Replace the selected columns (no columns means ``*``)."""
        checked = self._check_columns("select", columns)
        self.clear_part("select")
        for column in checked:
            self.add_part("select", column)
        return self

    def add_select(self, *columns: str) -> Select:
        """Append columns to the projection."""
        for column in self._check_columns("add_select", columns):
            self.add_part("select", column)
        return self

    def raw_select(self, expression: str) -> Select:
        """Replace the projection with one vendor-specific expression, used verbatim."""
        ensure_string("Select.raw_select", expression)
        self.clear_part("select")
        self.add_part("select", expression)
        return self

    def distinct(self, flag: bool = True) -> Select:
        self.add_part("distinct", bool(flag), append=False)
        return self

    # --- FROM / JOIN ---

    def from_(self, table: str, alias: str = "") -> Select:
        """Set the table rows are retrieved from, replacing any previous one."""
        self.add_part("from", self._table_reference("Select.from_", table, alias), append=False)
        return self

    def join(
        self,
        table: str,
        condition: str | CompositeExpression,
        alias: str = "",
        kind: str | JoinType = JoinType.INNER,
    ) -> Select:
        """Add a JOIN clause (INNER unless kind says otherwise)."""
        reference = self._table_reference("Select.join", table, alias)
        self.add_part("join", Join(kind=kind, table=reference, condition=condition))
        return self

    def inner_join(self, table: str, condition: str | CompositeExpression, alias: str = "") -> Select:
        return self.join(table, condition, alias, JoinType.INNER)

    def left_join(self, table: str, condition: str | CompositeExpression, alias: str = "") -> Select:
        return self.join(table, condition, alias, JoinType.LEFT)

    def right_join(self, table: str, condition: str | CompositeExpression, alias: str = "") -> Select:
        return self.join(table, condition, alias, JoinType.RIGHT)

    # --- GROUP BY / HAVING ---

    def group_by(self, *columns: str) -> Select:
        """Group rows by columns, replacing any previous grouping."""
        checked = self._check_columns("group_by", columns)
        self.clear_part("groupBy")
        for column in checked:
            self.add_part("groupBy", column)
        return self

    def add_group_by(self, *columns: str) -> Select:
        for column in self._check_columns("add_group_by", columns):
            self.add_part("groupBy", column)
        return self

    def having(self, *clauses: str | CompositeExpression) -> Select:
        """Replace any previous HAVING restrictions with clauses, ANDed together."""
        checked = _check_clauses("Select.having", clauses)
        self.clear_part("having")
        self._merge_composite("having", checked, CompositeType.AND)
        return self

    def and_having(self, *clauses: str | CompositeExpression) -> Select:
        checked = _check_clauses("Select.and_having", clauses)
        self._merge_composite("having", checked, CompositeType.AND)
        return self

    def or_having(self, *clauses: str | CompositeExpression) -> Select:
        checked = _check_clauses("Select.or_having", clauses)
        self._merge_composite("having", checked, CompositeType.OR)
        return self

    # --- rendering ---

    def _assemble(self) -> str:
        parts = self._parts
        columns = ", ".join(parts["select"]) if parts["select"] else "*"
        query = "SELECT DISTINCT " if parts["distinct"] else "SELECT "
        query += f"{columns} "
        if parts["from"] is not None:
            query += f"FROM {parts['from']} "
        for join in parts["join"]:
            query += f"{join.sql} "
        query += self._sql_where()
        if parts["groupBy"]:
            query += "GROUP BY " + ", ".join(parts["groupBy"]) + " "
        having = parts["having"]
        if having is not None and not having.is_empty():
            query += f"HAVING {having.sql} "
        query += self._sql_order_by()
        query += self._sql_limit()
        return query
