"""Type aliases for the soqlbuilder package.

Reusable definitions for the values accepted by the builder API.
"""

import datetime
from typing import Iterable, Sequence, Tuple, Union

from .values import Function, Raw

# Boolean connector of a condition to its predecessor: "AND" or "OR"
Boolean = str

# Sort direction of an ORDER BY entry: "ASC" or "DESC"
Direction = str

# Scalar accepted on the right-hand side of a condition
Value = Union[str, bool, int, float, None, Raw, Function, datetime.date, datetime.datetime]

# One field or many fields for the select list
Fields = Union[str, Sequence[str]]

# (column, operator, value) triple used by where_multiple()
ConditionTriple = Tuple[str, str, Value]
ConditionTriples = Iterable[ConditionTriple]
