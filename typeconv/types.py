"""Storage-side primitive type definitions."""

from datetime import datetime
from typing import Union

# Primitive values a storage backend understands. Converters should map
# their domain values onto one of these; nothing in typeconv checks it.
SqlPrimitive = Union[
    datetime,
    float,
    int,
    bytes,
    bool,
    str,
]

SQL_PRIMITIVE_TYPES: tuple[type, ...] = (datetime, float, int, bytes, bool, str)
