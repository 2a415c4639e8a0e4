"""Prepared statements: bind named parameters, execute on a DB-API cursor, fetch rows."""

from __future__ import annotations

import enum
import logging
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, Iterator, Mapping, Optional

from .parameter import Parameter, ParameterType

if TYPE_CHECKING:
    from .connection import Connection

logger = logging.getLogger(__name__)


class FetchStyle(enum.Enum):
    """Shape of the rows returned by fetch()/fetch_all()."""

    DICT = "dict"
    TUPLE = "tuple"
    OBJECT = "object"


class PreparedStatement:
    """SQL text with ``:name`` placeholders, the parameters bound to it and, once executed, its cursor."""

    def __init__(self, connection: "Connection", sql: str):
        self.connection = connection
        self.sql = sql
        self._parameters: dict[str, Parameter] = {}
        self._cursor = None

    # parameters

    def bind_param(self, name: str, value: Any, type: Optional[ParameterType | str] = None) -> Parameter:  # pylint: disable=redefined-builtin
        """Bind value to placeholder name (with or without its leading ``:``).

        With a type, the value is coerced (see Parameter); without, it is passed as-is.
        A Parameter instance is bound under name with its own value and type.
        """
        if isinstance(value, Parameter):
            parameter = Parameter(name=name, value=value.value, type=value.type)
        else:
            parameter = Parameter(name=name, value=value, type=type)
        self._parameters[parameter.name] = parameter
        return parameter

    def unbind_param(self, name: str) -> None:
        self._parameters.pop(name.lstrip(":"), None)

    def has_param(self, name: str) -> bool:
        return name.lstrip(":") in self._parameters

    def clear_params(self) -> None:
        self._parameters.clear()

    @property
    def parameters(self) -> dict[str, Any]:
        """Bound values, converted, keyed by name without the leading ``:``."""
        return {name: parameter.converted_value for name, parameter in self._parameters.items()}

    # execution

    def execute(self, parameters: Optional[Mapping[str, Any]] = None) -> PreparedStatement:
        """Execute with the bound parameters, overridden by those given here.

        Returns:
            self, so rows can be fetched in the same expression.
        """
        for name, value in (parameters or {}).items():
            self.bind_param(name, value)
        sql = self.connection.dialect.translate_placeholders(self.sql)
        values = self.parameters
        logger.debug("Executing %s with %s", sql, values)
        self.close()
        cursor = self.connection.resource.cursor()
        cursor.execute(sql, values)
        self._cursor = cursor
        self.connection.track_cursor(cursor)
        return self

    def close(self) -> None:
        """Close the cursor of the previous execution, if any; its rows can no longer be fetched."""
        if self._cursor is not None:
            self._cursor.close()
            self._cursor = None

    def _require_cursor(self):
        if self._cursor is None:
            raise ValueError("Statement has not been executed yet")
        return self._cursor

    def _format_row(self, row: Any, style: FetchStyle) -> Any:
        if row is None:
            return None
        if style is FetchStyle.TUPLE:
            return tuple(row)
        names = [column[0] for column in self._cursor.description]
        data = dict(zip(names, row))
        if style is FetchStyle.OBJECT:
            return SimpleNamespace(**data)
        return data

    def fetch(self, style: FetchStyle = FetchStyle.DICT) -> Any:
        """Return the next row, or None when the result set is exhausted."""
        return self._format_row(self._require_cursor().fetchone(), style)

    def fetch_all(self, style: FetchStyle = FetchStyle.DICT) -> list[Any]:
        return [self._format_row(row, style) for row in self._require_cursor().fetchall()]

    def fetch_column(self, index: int = 0) -> Any:
        """Return one column of the next row, or None when the result set is exhausted."""
        row = self._require_cursor().fetchone()
        return None if row is None else row[index]

    def row_count(self) -> int:
        """Rows affected by the last INSERT/UPDATE/DELETE (driver-defined for SELECT)."""
        return self._require_cursor().rowcount

    def __iter__(self) -> Iterator[Any]:
        return iter(self.fetch_all())
