"""MySQL / MariaDB dialect, through pymysql."""

import logging
import urllib.parse
from typing import ClassVar

from .base import Dialect

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3306


class MysqlDialect(Dialect):
    """pymysql uses the ``pyformat`` paramstyle and reports generated ids in ``cursor.lastrowid``."""

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ("mysql", "mariadb")
    PARAMSTYLE: ClassVar[str] = "pyformat"

    def connect(self, url: str):
        import pymysql  # pylint: disable=import-outside-toplevel,import-error
        parsed = urllib.parse.urlparse(url)
        database = (parsed.path or "")[1:] or None
        logger.info("Connecting to MySQL database %s on %s", database, parsed.hostname)
        return pymysql.connect(
            host=parsed.hostname,
            user=parsed.username,
            password=parsed.password,
            database=database,
            port=parsed.port or DEFAULT_PORT,
            charset="utf8mb4",
        )
