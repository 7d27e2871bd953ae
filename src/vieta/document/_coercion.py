from typing import Any

from vieta.exceptions import TypeMismatchError


def _describe(value: Any) -> str:
    return "null" if value is None else f"{type(value).__name__} {value!r}"


def is_null(value: Any) -> bool:
    return value is None


def as_integer(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeMismatchError(f"Expected an integer, got {_describe(value)}")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise TypeMismatchError(f"Expected an integer, got {_describe(value)}")


def as_float(value: Any) -> float:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    raise TypeMismatchError(f"Expected a number, got {_describe(value)}")


def as_string(value: Any) -> str:
    if isinstance(value, str):
        return value
    raise TypeMismatchError(f"Expected a string, got {_describe(value)}")
