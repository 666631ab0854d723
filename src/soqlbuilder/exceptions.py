"""Exceptions raised by soqlbuilder.

Builder calls never raise; every failure is detected when the query is
rendered and reported as an :class:`InvalidQueryError`. Its subclasses name
the precondition that failed, both by type and by their ``kind`` attribute.
"""

from typing import Any, Dict


class SoqlBuilderError(Exception):
    """Base exception for all soqlbuilder errors.

    Attributes:
        message: Human-readable error message
        details: Extra context as key-value pairs (e.g. ``starts=2, ends=1``)
    """

    kind = "error"

    def __init__(self, message: str = "", **details: Any) -> None:
        self.message = message
        self.details: Dict[str, Any] = details
        super().__init__(message)

    def __str__(self) -> str:
        if not self.details:
            return self.message
        rendered = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
        return f"{self.message} ({rendered})" if self.message else rendered

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, message={self.message!r}, details={self.details!r})"


class InvalidQueryError(SoqlBuilderError):
    """Raised when the builder state cannot be rendered into a query.

    Not retryable: the builder must be fixed before rendering again.
    """

    kind = "invalid_query"


class MissingObjectError(InvalidQueryError):
    """No target object was set, or it is an empty string.

    Example:
        >>> raise MissingObjectError("Query must contain sObject name")
    """

    kind = "missing_object"


class MissingFieldsError(InvalidQueryError):
    """No fields were added to the select list."""

    kind = "missing_fields"


class UnbalancedGroupingError(InvalidQueryError):
    """start_where() and end_where() were called a different number of times.

    Example:
        >>> raise UnbalancedGroupingError("Unmatched parenthesis", starts=2, ends=1)
    """

    kind = "unbalanced_grouping"
