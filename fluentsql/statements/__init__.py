"""Statement builders: SELECT, INSERT, UPDATE and DELETE."""

from .base import Statement, StatementState
from .delete import Delete
from .insert import Insert
from .select import Select
from .update import Update

__all__ = [
    "Delete",
    "Insert",
    "Select",
    "Statement",
    "StatementState",
    "Update",
]
