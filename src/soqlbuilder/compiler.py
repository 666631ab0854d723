"""SOQL compiler.

Renders the accumulated state of a :class:`~soqlbuilder.builder.SoqlBuilder`
into a query string.

Grouping is driven by per-index counts: a condition at index ``i`` is
prefixed with one ``(`` for every start marker recorded at ``i`` and
suffixed with one ``)`` for every end marker recorded at ``i``. Markers are
never paired with each other, so a caller that nests start_where() /
end_where() incorrectly but with equal totals gets plausible looking yet
unbalanced text. Only the total counts are validated.
"""

from typing import TYPE_CHECKING, Dict, List, Sequence

from .exceptions import MissingFieldsError, MissingObjectError, UnbalancedGroupingError
from .logger import get_logger
from .settings import settings

if TYPE_CHECKING:
    from .builder import SoqlBuilder

__all__ = (
    "SoqlCompiler",
    "soql_compiler",
)

logger = get_logger(__name__)


def _count_markers(markers: Sequence[int]) -> Dict[int, int]:
    counts: Dict[int, int] = {}
    for index in markers:
        counts[index] = counts.get(index, 0) + 1
    return counts


def _unique(fields: Sequence[str]) -> List[str]:
    # First occurrence wins
    return list(dict.fromkeys(fields))


class SoqlCompiler:
    """Compile builder state into a SOQL SELECT statement."""

    def compile(self, builder: "SoqlBuilder") -> str:
        """Render ``builder`` without modifying it.

        Raises:
            MissingObjectError: If no target object is set
            MissingFieldsError: If no fields were selected
            UnbalancedGroupingError: If start and end marker counts differ
        """
        self.validate(builder)

        clauses = [
            "SELECT " + ", ".join(_unique(builder.fields)),
            "FROM " + builder.object_name,
        ]
        if builder.conditions:
            clauses.append("WHERE " + self.compile_where(builder))
        if builder.orders:
            clauses.append("ORDER BY " + ", ".join(order.render() for order in builder.orders))
        # Zero is treated as unset for both
        if builder.limit_value:
            clauses.append(f"LIMIT {builder.limit_value}")
        if builder.offset_value:
            clauses.append(f"OFFSET {builder.offset_value}")

        soql = " ".join(clauses)
        if settings.LOG_QUERIES:
            logger.message("Compiled SOQL: %s", soql)
        return soql

    def validate(self, builder: "SoqlBuilder") -> None:
        """Check the render preconditions in order."""
        if not builder.object_name:
            logger.debug("Rejecting query without sObject name")
            raise MissingObjectError(
                "Query must contain sObject name. Use from_() or set_from() method to set it."
            )
        if not builder.fields:
            logger.debug("Rejecting query on %s without fields", builder.object_name)
            raise MissingFieldsError(
                "Query must contain fields for select. Use select() or add_select() method to set them.",
                object_name=builder.object_name,
            )
        starts, ends = len(builder.group_starts), len(builder.group_ends)
        if starts != ends:
            logger.debug("Rejecting query on %s with %d group starts and %d group ends", builder.object_name, starts, ends)
            raise UnbalancedGroupingError(
                "Unmatched parenthesis for grouped expressions. Make sure to call start_where() and end_where().",
                starts=starts,
                ends=ends,
            )

    def compile_where(self, builder: "SoqlBuilder") -> str:
        """Render the conditions, without the WHERE keyword."""
        opening = _count_markers(builder.group_starts)
        closing = _count_markers(builder.group_ends)

        parts: List[str] = []
        for i, condition in enumerate(builder.conditions):
            # The first condition has no predecessor to join
            if i > 0:
                parts.append(condition.boolean)
            parts.append(condition.render(opening.get(i, 0), closing.get(i, 0)))
        return " ".join(parts)


soql_compiler = SoqlCompiler()
