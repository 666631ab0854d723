"""Fluent SOQL query builder.

Typical usage:

    soql = (
        SoqlBuilder.select(["Id", "Name"])
        .set_from("Account")
        .where("Name", "=", "Mikhail")
        .order_by("Name")
        .limit(10)
        .to_soql()
    )

Grouped conditions are opened with :meth:`SoqlBuilder.start_where` and closed
with :meth:`SoqlBuilder.end_where`:

    builder.where("Warranty", "=", "Expired")
    builder.start_where()
    builder.or_where("Warranty", "=", "Active")
    builder.where("Days_Left__c", "<=", "60")
    builder.end_where()
    # ... WHERE Warranty = 'Expired' OR (Warranty = 'Active' AND Days_Left__c <= '60')
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from .compiler import soql_compiler
from .logger import get_logger
from .schema import Condition, OrderClause
from .types import Boolean, ConditionTriples, Direction, Fields, Value
from .values import Function, format_value, format_values

__all__ = ("SoqlBuilder",)

logger = get_logger(__name__)


class SoqlBuilder:
    """A fluent API for building Salesforce SOQL queries.

    Every mutating method returns the builder itself. Nothing is validated
    until :meth:`to_soql` is called, which may be called any number of times.
    """

    def __init__(self) -> None:
        self.fields: List[str] = []
        self.object_name: Optional[str] = None
        self.conditions: List[Condition] = []
        self.group_starts: List[int] = []
        self.group_ends: List[int] = []
        self.orders: List[OrderClause] = []
        self.limit_value: Optional[int] = None
        self.offset_value: Optional[int] = None

    # -------------------
    # Select / from
    # -------------------
    @classmethod
    def select(cls, fields: Fields) -> "SoqlBuilder":
        """Create a builder selecting ``fields``.

        Call :meth:`add_select` instead on an existing builder.
        """
        return cls().add_select(fields)

    def add_select(self, field: Fields) -> "SoqlBuilder":
        """Add one field or a sequence of fields to select.

        Duplicates are kept here and dropped when the query is rendered.
        """
        if isinstance(field, str):
            self.fields.append(field)
        else:
            self.fields.extend(field)
        return self

    @classmethod
    def from_(cls, obj: str) -> "SoqlBuilder":
        """Create a builder targeting ``obj``.

        Call :meth:`set_from` instead on an existing builder.
        """
        return cls().set_from(obj)

    def set_from(self, obj: str) -> "SoqlBuilder":
        """Set the target object, replacing any previous one."""
        self.object_name = obj
        return self

    # -------------------
    # Grouping
    # -------------------
    def start_where(self) -> "SoqlBuilder":
        """Open a group before the next condition added."""
        self.group_starts.append(len(self.conditions))
        return self

    def end_where(self) -> "SoqlBuilder":
        """Close a group after the most recently added condition.

        With no conditions yet the marker is clamped to the first condition.
        """
        if not self.conditions:
            logger.warning("end_where() called before any condition; closing group at the first condition")
            self.group_ends.append(0)
        else:
            self.group_ends.append(len(self.conditions) - 1)
        return self

    # -------------------
    # Conditions
    # -------------------
    def _add_condition(
        self, column: Optional[str], operator: Optional[str], value: str, boolean: Boolean
    ) -> "SoqlBuilder":
        self.conditions.append(Condition(column=column, operator=operator, value=value, boolean=boolean))
        return self

    def where(self, column: str, operator: str, value: Value, boolean: Boolean = "AND") -> "SoqlBuilder":
        """Add a condition; ``value`` is quoted according to its type."""
        return self._add_condition(column, operator, format_value(value), boolean)

    def or_where(self, column: str, operator: str, value: Value) -> "SoqlBuilder":
        return self.where(column, operator, value, "OR")

    def where_date(self, column: str, operator: str, value: Value, boolean: Boolean = "AND") -> "SoqlBuilder":
        """Add a condition on a date value, which is never quoted.

        Strings are passed through as-is, so they must already be valid
        literals such as ``2019-10-10`` or ``LAST_N_DAYS:30``.
        """
        return self._add_condition(column, operator, format_value(value, "date"), boolean)

    def or_where_date(self, column: str, operator: str, value: Value) -> "SoqlBuilder":
        return self.where_date(column, operator, value, "OR")

    def where_multiple(self, conditions: ConditionTriples, boolean: Boolean = "AND") -> "SoqlBuilder":
        """Add several ``(column, operator, value)`` conditions sharing one boolean."""
        for column, operator, value in conditions:
            self.where(column, operator, value, boolean)
        return self

    def where_in(
        self, column: str, values: Sequence[Value], boolean: Boolean = "AND", negate: bool = False
    ) -> "SoqlBuilder":
        """Add an ``IN`` condition, or ``NOT IN`` when ``negate`` is true."""
        operator = "NOT IN" if negate else "IN"
        return self._add_condition(column, operator, "(" + format_values(values) + ")", boolean)

    def where_not_in(self, column: str, values: Sequence[Value]) -> "SoqlBuilder":
        return self.where_in(column, values, "AND", True)

    def or_where_in(self, column: str, values: Sequence[Value], negate: bool = False) -> "SoqlBuilder":
        return self.where_in(column, values, "OR", negate)

    def or_where_not_in(self, column: str, values: Sequence[Value]) -> "SoqlBuilder":
        return self.where_in(column, values, "OR", True)

    def where_function(self, column: str, function: str, value: Any, boolean: Boolean = "AND") -> "SoqlBuilder":
        """Add a condition calling ``function``, e.g. ``Tags__c INCLUDES('a', 'b')``.

        ``value`` may be a single value or any non-string iterable of values
        (list, tuple, set, generator); iterables are formatted per item.
        """
        return self._add_condition(column, None, Function(function, value).render(), boolean)

    # -------------------
    # Ordering / pagination
    # -------------------
    def order_by(self, column: str, direction: Direction = "ASC") -> "SoqlBuilder":
        self.orders.append(OrderClause(column=column, direction=direction))
        return self

    def order_by_desc(self, column: str) -> "SoqlBuilder":
        return self.order_by(column, "DESC")

    def limit(self, limit: int) -> "SoqlBuilder":
        """Set the row limit. ``0`` renders no LIMIT clause."""
        self.limit_value = limit
        return self

    def offset(self, offset: int) -> "SoqlBuilder":
        """Set the row offset. ``0`` renders no OFFSET clause."""
        self.offset_value = offset
        return self

    # -------------------
    # Rendering
    # -------------------
    def to_soql(self) -> str:
        """Compose the query from the current state.

        Raises:
            InvalidQueryError: If the object or fields are missing, or the
                group markers are unbalanced
        """
        return soql_compiler.compile(self)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain snapshot of the accumulated state."""
        return {
            "fields": list(self.fields),
            "object": self.object_name,
            "conditions": [c.model_dump() for c in self.conditions],
            "group_starts": list(self.group_starts),
            "group_ends": list(self.group_ends),
            "orders": [o.model_dump() for o in self.orders],
            "limit": self.limit_value,
            "offset": self.offset_value,
        }

    def __str__(self) -> str:
        return self.to_soql()

    def __repr__(self) -> str:
        return (
            f"<SoqlBuilder: object={self.object_name!r}, "
            f"fields={len(self.fields)}, conditions={len(self.conditions)}>"
        )
