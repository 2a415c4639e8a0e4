"""Engine dialects (SQLite, MySQL/MariaDB, PostgreSQL), looked up from database URL schemes."""

import urllib.parse

from .base import Dialect, placeholder_names
from .sqlite import SqliteDialect
from .mysql import MysqlDialect
from .postgres import PostgresDialect

_DIALECTS: tuple[type[Dialect], ...] = (SqliteDialect, MysqlDialect, PostgresDialect)


def get_dialect_for_scheme(scheme: str) -> Dialect:
    """Dialect handling a URL scheme; a driver suffix is ignored (``postgresql+psycopg2``)."""
    engine = (scheme or "").partition("+")[0].lower()
    matches = [cls for cls in _DIALECTS if engine in cls.SUPPORTED_SCHEMA]
    if not matches:
        raise ValueError(f"Unsupported database scheme: {scheme}")
    return matches[0]()


def get_dialect_for_url(url: str) -> Dialect:
    return get_dialect_for_scheme(urllib.parse.urlparse(url).scheme)


__all__ = [
    "Dialect",
    "MysqlDialect",
    "PostgresDialect",
    "SqliteDialect",
    "get_dialect_for_scheme",
    "get_dialect_for_url",
    "placeholder_names",
]
