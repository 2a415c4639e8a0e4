"""fluentsql: a fluent SQL statement builder with pluggable DB-API drivers."""

from .connection import Connection, connect, get_connection
from .exceptions import CollectionTraversalError, InvalidArgumentError, UnexpectedResultError
from .expression_builder import ExpressionBuilder
from .expressions import CompositeExpression, CompositeType
from .parameter import Parameter, ParameterType
from .prepared import FetchStyle, PreparedStatement
from .query_builder import QueryBuilder
from .statements import Delete, Insert, Select, Update

__all__ = [
    "CollectionTraversalError",
    "CompositeExpression",
    "CompositeType",
    "Connection",
    "Delete",
    "ExpressionBuilder",
    "FetchStyle",
    "Insert",
    "InvalidArgumentError",
    "Parameter",
    "ParameterType",
    "PreparedStatement",
    "QueryBuilder",
    "Select",
    "UnexpectedResultError",
    "Update",
    "connect",
    "get_connection",
]
