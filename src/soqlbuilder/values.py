"""Value formatting for WHERE conditions.

Turns Python values into the literal text embedded in a query:

- ``str`` is wrapped in single quotes (embedded quotes are NOT escaped)
- ``bool`` becomes ``true`` / ``false``
- ``None`` becomes ``null``
- ``datetime.date`` / ``datetime.datetime`` become unquoted SOQL date and
  dateTime literals
- :class:`Raw` is emitted verbatim
- :class:`Function` renders as ``name(arg, ...)`` with formatted arguments
- anything else uses ``str(value)``

A forced ``"date"`` type skips quoting: date objects and ``None`` are
rendered as above and every other value passes through as-is.
"""

import datetime
from typing import Any, Iterable, Optional

__all__ = (
    "Function",
    "Raw",
    "format_date_literal",
    "format_value",
    "format_values",
    "is_multiple",
)


class Raw:
    """A pre-formatted expression emitted without quoting.

    Example:
        >>> builder.where("CloseDate", "=", Raw("LAST_N_DAYS:30"))
    """

    __slots__ = ("expr",)

    def __init__(self, expr: Any) -> None:
        self.expr = str(expr)

    def __str__(self) -> str:
        return self.expr

    def __repr__(self) -> str:
        return f"Raw({self.expr!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Raw):
            return self.expr == other.expr
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.expr)


class Function:
    """A function call whose arguments are formatted like any other value.

    ``args`` may be a single value or any non-string iterable of values.

    Example:
        >>> format_value(Function("INCLUDES", ["a", "b"]))
        "INCLUDES('a', 'b')"
    """

    __slots__ = ("name", "args")

    def __init__(self, name: str, args: Any = ()) -> None:
        self.name = name
        self.args = tuple(args) if is_multiple(args) else (args,)

    def render(self) -> str:
        return f"{self.name}({format_values(self.args)})"

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Function({self.name!r}, {list(self.args)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Function):
            return (self.name, self.args) == (other.name, other.args)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.name, self.args))


def is_multiple(value: Any) -> bool:
    """Return True for iterables holding several values; strings count as one."""
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes))


def format_date_literal(value: Any) -> str:
    """Render a date-typed value without quotes.

    Naive datetimes are taken as UTC; aware ones are converted to UTC.
    Years are always four digits.
    """
    # datetime is a subclass of date, check it first
    if isinstance(value, datetime.datetime):
        if value.tzinfo is not None:
            value = value.astimezone(datetime.timezone.utc)
        return value.replace(tzinfo=None, microsecond=0).isoformat() + "Z"
    if isinstance(value, datetime.date):
        return value.isoformat()
    if value is None:
        return "null"
    return str(value)


def format_value(value: Any, force_type: Optional[str] = None) -> str:
    """Format a single value for embedding in a condition.

    Args:
        value: Raw Python value
        force_type: ``"date"`` to bypass quoting

    Returns:
        Literal text for the query
    """
    if force_type == "date":
        return format_date_literal(value)
    if isinstance(value, Raw):
        return value.expr
    if isinstance(value, Function):
        return value.render()
    if isinstance(value, str):
        return "'" + value + "'"
    # bool is an int subclass, so it must be handled before the fallback
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, datetime.date):
        return format_date_literal(value)
    return str(value)


def format_values(values: Iterable[Any]) -> str:
    """Format each value and join them with ``", "``."""
    return ", ".join(format_value(v) for v in values)
