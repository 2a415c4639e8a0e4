"""Base Dialect type: placeholder translation and last-insert-id lookup shared by engines."""

import re
from abc import ABC, abstractmethod
from typing import Any, ClassVar

from pydantic import BaseModel

# ":name" but not "::type" casts nor "a:b" inside identifiers
_NAMED_PLACEHOLDER = re.compile(r"(?<![:\w]):([A-Za-z_]\w*)")


def placeholder_names(sql: str) -> list[str]:
    """Names of the ``:name`` placeholders in sql, in order of appearance."""
    return _NAMED_PLACEHOLDER.findall(sql)


class Dialect(BaseModel, ABC):
    """What differs between engines once a statement has been rendered.

    Statements are always rendered with ``:name`` placeholders; the dialect
    rewrites them to the driver's DB-API paramstyle before execution, opens
    driver connections from URLs and knows how to ask for the last generated id.
    """

    model_config = {"arbitrary_types_allowed": True}

    SUPPORTED_SCHEMA: ClassVar[tuple[str, ...]] = ()
    """URL schemes this dialect handles (e.g. ('sqlite',), ('postgresql', 'postgres'))."""

    PARAMSTYLE: ClassVar[str] = "named"
    """DB-API paramstyle of the driver: 'named' (``:name``) or 'pyformat' (``%(name)s``)."""

    @abstractmethod
    def connect(self, url: str) -> Any:
        """Return a new raw driver connection for the given URL."""
        ...  # pylint: disable=unnecessary-ellipsis

    def translate_placeholders(self, sql: str) -> str:
        """Rewrite ``:name`` placeholders into this dialect's paramstyle."""
        if self.PARAMSTYLE == "named":
            return sql
        if self.PARAMSTYLE == "pyformat":
            return _NAMED_PLACEHOLDER.sub(r"%(\1)s", sql.replace("%", "%%"))
        raise ValueError(f"Unsupported paramstyle: {self.PARAMSTYLE}")

    def last_insert_id(self, resource: Any, cursor: Any) -> Any:
        """Id generated by the last INSERT, given the raw connection and the cursor that ran it.

        Returns None when nothing has been executed on the connection yet.
        """
        if cursor is None:
            return None
        return cursor.lastrowid
