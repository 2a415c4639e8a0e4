"""Named database URLs and the Connection wrapper statements are executed on."""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional

from .dialects import Dialect, get_dialect_for_url
from .prepared import PreparedStatement

logger = logging.getLogger(__name__)

_urls: dict[str, str | Callable[[], str]] = {}


def connect(database_url: str | Callable[[], str], name: str = "default") -> None:
    """Register a database URL (or a callable returning one) under name.

    No connection is opened here; see get_connection().
    """
    if not isinstance(database_url, str) and not callable(database_url):
        raise ValueError(
            f"database_url must be a str or a method returning one; got {type(database_url).__name__}"
        )
    _urls[name] = database_url


def _get_url(name: str) -> str:
    try:
        url = _urls[name]
    except KeyError as error:
        raise ValueError(f"No connection configured with name=`{name}`") from error
    if callable(url):
        url = url()
    return url


class Connection:
    """A raw DB-API connection together with the dialect that drives it."""

    def __init__(self, resource: Any, dialect: Dialect):
        self._resource = resource
        self.dialect = dialect
        self._last_cursor = None

    @property
    def resource(self) -> Any:
        """The underlying driver connection (e.g. sqlite3.Connection)."""
        return self._resource

    def prepare(self, sql: str, parameters: Optional[Mapping[str, Any]] = None) -> PreparedStatement:
        """Return a PreparedStatement for sql with parameters already bound."""
        statement = PreparedStatement(self, sql)
        for name, value in (parameters or {}).items():
            statement.bind_param(name, value)
        return statement

    def execute(self, sql: str, parameters: Optional[Mapping[str, Any]] = None) -> PreparedStatement:
        """Prepare and execute sql; return the executed statement."""
        return self.prepare(sql, parameters).execute()

    def query(self, sql: str) -> PreparedStatement:
        """Execute sql without parameters."""
        return self.execute(sql)

    def track_cursor(self, cursor: Any) -> None:
        """Remember the cursor of the latest execution; last_insert_id() reads from it."""
        self._last_cursor = cursor

    def last_insert_id(self) -> Any:
        """Id generated by the last INSERT executed on this connection (None before any execution)."""
        return self.dialect.last_insert_id(self._resource, self._last_cursor)

    def commit(self) -> None:
        self._resource.commit()

    def rollback(self) -> None:
        self._resource.rollback()

    def close(self) -> None:
        self._resource.close()

    def __enter__(self) -> Connection:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def get_connection(name: str = "default") -> Connection:
    """Open a new Connection for the URL registered under name.

    Raises:
        ValueError: If no URL is registered under name, or its scheme is unsupported.
    """
    url = _get_url(name)
    dialect = get_dialect_for_url(url)
    logger.debug("Opening connection %r with %s", name, type(dialect).__name__)
    return Connection(dialect.connect(url), dialect)
