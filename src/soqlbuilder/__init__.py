"""
soqlbuilder: a fluent builder for Salesforce SOQL SELECT statements.

Exposes the `SoqlBuilder` class, the `Raw` and `Function` value wrappers and the
exceptions raised when a query cannot be rendered.
"""

from .builder import SoqlBuilder
from .exceptions import (
    InvalidQueryError,
    MissingFieldsError,
    MissingObjectError,
    SoqlBuilderError,
    UnbalancedGroupingError,
)
from .values import Function, Raw

__version__ = "0.1.0"

__all__ = [
    "SoqlBuilder",
    "Raw",
    "Function",
    "SoqlBuilderError",
    "InvalidQueryError",
    "MissingObjectError",
    "MissingFieldsError",
    "UnbalancedGroupingError",
]
