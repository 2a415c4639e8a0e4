"""Base statement type: a bag of named clause parts plus a cached rendering."""

from __future__ import annotations

import copy
import enum
import logging
from abc import ABC, abstractmethod
from typing import Any, ClassVar, Mapping, Optional

from pydantic import BaseModel, Field, PrivateAttr

from ..expressions import Alias
from ..utils.ensure_string import ensure_string

logger = logging.getLogger("fluentsql")


class StatementState(enum.Enum):
    """Whether the cached SQL string reflects the current parts."""

    DIRTY = "dirty"
    CLEAN = "clean"


class Statement(BaseModel, ABC):
    """Accumulates clause parts through chained calls and renders them into one SQL string.

    Each subclass declares its parts in ``PARTS`` (clause name -> empty value)
    and assembles them in ``_assemble`` in its fixed clause order. Any call
    that adds, replaces or clears a part marks the statement DIRTY; rendering
    a DIRTY statement assembles, caches and marks it CLEAN, and rendering a
    CLEAN statement returns the cached string.

    Parts returned by ``get_part`` are the live objects; mutating them
    directly bypasses the cache invalidation.
    """

    model_config = {"arbitrary_types_allowed": True}

    PARTS: ClassVar[dict[str, Any]] = {}
    """Clause names and their empty value (None for scalars, [] / {} for collections)."""

    connection: Optional[Any] = Field(default=None, exclude=True)
    """Adapter connection the statement is prepared/executed on (see fluentsql.connection)."""

    _parts: dict[str, Any] = PrivateAttr(default_factory=dict)
    _state: StatementState = PrivateAttr(default=StatementState.DIRTY)
    _sql: Optional[str] = PrivateAttr(default=None)

    def model_post_init(self, __context: Any) -> None:
        self._parts = copy.deepcopy(self.PARTS)

    # --- parts protocol ---

    def get_part(self, name: str) -> Any:
        """Return the current value of a part (None, a value object, a list or a dict)."""
        return self._parts[name]

    def get_parts(self) -> dict[str, Any]:
        """Return a shallow copy of every part."""
        return dict(self._parts)

    def add_part(self, name: str, value: Any, append: bool = True) -> None:
        """Store value in a part: appended to a list part when append is True, else replacing it."""
        if name not in self._parts:
            raise KeyError(f"{type(self).__name__} has no part named {name!r}")
        current = self._parts[name]
        if append and isinstance(current, list):
            current.append(value)
        else:
            self._parts[name] = value
        self._mark_dirty()

    def clear_part(self, name: str) -> None:
        """Reset a part to its empty value."""
        if name not in self._parts:
            raise KeyError(f"{type(self).__name__} has no part named {name!r}")
        self._parts[name] = copy.deepcopy(self.PARTS[name])
        self._mark_dirty()

    # --- state ---

    def _mark_dirty(self) -> None:
        self._state = StatementState.DIRTY
        self._sql = None

    @property
    def state(self) -> StatementState:
        return self._state

    def is_clean(self) -> bool:
        return self._state is StatementState.CLEAN

    # --- rendering ---

    @abstractmethod
    def _assemble(self) -> str:
        """Build the SQL text from the parts, in this statement's clause order."""
        ...  # pylint: disable=unnecessary-ellipsis

    def get_sql_string(self) -> str:
        """Return the SQL for this statement, assembling it only if a part changed since last call."""
        if self._state is StatementState.CLEAN and self._sql is not None:
            return self._sql
        self._sql = self._assemble().rstrip()
        self._state = StatementState.CLEAN
        logger.debug("Rendered %s: %s", type(self).__name__, self._sql)
        return self._sql

    @property
    def sql(self) -> str:
        return self.get_sql_string()

    def __str__(self) -> str:
        return self.get_sql_string()

    # --- helpers shared by subclasses ---

    @staticmethod
    def _table_reference(method: str, table: Any, alias: Any = "") -> str | Alias:
        """Validate a table name and optional alias; return the name or an Alias."""
        ensure_string(method, table)
        ensure_string(method, alias, allow_empty=True)
        if alias:
            return Alias(target=table, name=alias)
        return table

    # --- execution through the adapter layer ---

    def _require_connection(self):
        if self.connection is None:
            raise ValueError(
                f"{type(self).__name__} is not bound to a connection; "
                "create it from a QueryBuilder built with one"
            )
        return self.connection

    def prepare(self, parameters: Optional[Mapping[str, Any]] = None):
        """Prepare the rendered SQL on the bound connection and return a PreparedStatement."""
        return self._require_connection().prepare(self.get_sql_string(), parameters)

    def execute(self, parameters: Optional[Mapping[str, Any]] = None):
        """Prepare and execute the rendered SQL; return the executed PreparedStatement."""
        statement = self.prepare(parameters)
        statement.execute()
        return statement
