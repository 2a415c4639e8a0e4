"""SQL expression and clause value types used by the statement builders.

``CompositeExpression`` is the AND/OR tree that WHERE and HAVING clauses are
accumulated into; its leaves are plain condition strings (e.g.
``"u.age >= :age"``) produced by callers or by ``ExpressionBuilder``.
``Alias``, ``Order``, ``Limit`` and ``Join`` are small value objects that
validate their arguments on construction and render through ``.sql``.
"""

from ._bases import Expression
from .alias import Alias
from .composite import CompositeExpression, CompositeType
from .join import Join, JoinType
from .limit import Limit
from .order import Order, SortDirection

__all__ = [
    "Alias",
    "CompositeExpression",
    "CompositeType",
    "Expression",
    "Join",
    "JoinType",
    "Limit",
    "Order",
    "SortDirection",
]
