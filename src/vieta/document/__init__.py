from ._coercion import as_float, as_integer, as_string, is_null
from ._document import Path, Value, get, parse, serialize, set_value

__all__ = [
    "Path",
    "Value",
    "as_float",
    "as_integer",
    "as_string",
    "get",
    "is_null",
    "parse",
    "serialize",
    "set_value",
]
