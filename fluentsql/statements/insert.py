"""INSERT statement builder."""

from __future__ import annotations

from typing import Any, ClassVar, Mapping

from ..exceptions import InvalidArgumentError
from ..utils.ensure_string import ensure_string
from .base import Statement


class Insert(Statement):
    """Fluent INSERT: target table, then column/value pairs.

    Example:
        Insert().into("users").values({"name": ":name", "username": ":username"})
        # INSERT INTO users (name, username) VALUES (:name, :username)
    """

    PARTS: ClassVar[dict[str, Any]] = {
        "into": None,
        "values": {},
    }

    def into(self, table: str, alias: str = "") -> Insert:
        """Set the table rows are inserted into, replacing any previous one."""
        self.add_part("into", self._table_reference("Insert.into", table, alias), append=False)
        return self

    def value(self, column: str, value: Any) -> Insert:
        """Add (or overwrite) the value inserted into one column."""
        ensure_string("Insert.value", column)
        pairs = dict(self.get_part("values"))
        pairs[column] = value
        self.add_part("values", pairs, append=False)
        return self

    def values(self, values: Mapping[str, Any]) -> Insert:
        """Replace every column/value pair with those of a mapping (in its order)."""
        if not isinstance(values, Mapping):
            raise InvalidArgumentError("Insert.values", "a mapping of column names to values", values)
        pairs = {ensure_string("Insert.values", column): value for column, value in values.items()}
        self.add_part("values", pairs, append=False)
        return self

    def _assemble(self) -> str:
        parts = self._parts
        if parts["into"] is None:
            raise ValueError("Insert has no table; call into() first")
        query = f"INSERT INTO {parts['into']} "
        if parts["values"]:
            columns = ", ".join(parts["values"])
            values = ", ".join(str(value) for value in parts["values"].values())
            query += f"({columns}) VALUES ({values})"
        return query
