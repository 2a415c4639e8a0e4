"""SQLite dialect."""

import logging
import urllib.parse
from typing import ClassVar

from .base import Dialect

logger = logging.getLogger(__name__)


def _database_path(url: str) -> str:
    """``sqlite:////abs/file.db`` -> ``/abs/file.db``; ``sqlite://`` -> in-memory database."""
    parsed = urllib.parse.urlparse(url)
    return (parsed.path or "")[1:] or parsed.hostname or ":memory:"


class SqliteDialect(Dialect):
    """SQLite through the standard sqlite3 module, which binds ``:name`` natively."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("sqlite",)

    def connect(self, url: str):
        import sqlite3
        path = _database_path(url)
        logger.info("Connecting to SQLite database %s", path)
        resource = sqlite3.connect(path)
        resource.execute("PRAGMA foreign_keys = ON")
        return resource
