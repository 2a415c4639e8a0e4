"""PostgreSQL dialect, through psycopg2."""

import logging
import urllib.parse
from typing import Any, ClassVar

from .base import Dialect

logger = logging.getLogger(__name__)


class PostgresDialect(Dialect):
    """psycopg2 uses the ``pyformat`` paramstyle; generated ids come from the session's sequences."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("postgresql", "postgres")
    PARAMSTYLE: ClassVar[str] = "pyformat"

    def connect(self, url: str):
        import psycopg2  # pylint: disable=import-outside-toplevel,import-error
        parsed = urllib.parse.urlparse(url)
        database = (parsed.path or "")[1:] or None
        logger.info("Connecting to PostgreSQL database %s on %s", database, parsed.hostname)
        return psycopg2.connect(
            host=parsed.hostname,
            user=parsed.username,
            password=parsed.password,
            dbname=database,
            port=parsed.port,
        )

    def last_insert_id(self, resource: Any, cursor: Any) -> Any:
        # cursor.lastrowid is an OID here, not the serial value
        if cursor is None:
            return None
        with resource.cursor() as lookup:
            lookup.execute("SELECT LASTVAL()")
            return lookup.fetchone()[0]
