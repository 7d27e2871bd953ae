from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, TypeAlias

import orjson

from vieta.exceptions import MissingFieldError, ParseError, TypeMismatchError

Value: TypeAlias = (
    None | bool | int | float | str | list["Value"] | dict[str, "Value"]
)
Key: TypeAlias = str | int
Path: TypeAlias = Sequence[Key]


def _check_finite(value: Any, path: list[Key]) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        raise TypeMismatchError(
            f"Value can not be serialized: {value} at {_format_path(path)} "
            "is not a finite number"
        )
    if isinstance(value, dict):
        for key, child in value.items():
            _check_finite(child, [*path, key])
    elif isinstance(value, list):
        for index, child in enumerate(value):
            _check_finite(child, [*path, index])


def serialize(value: Value) -> str:
    """Two-space indented JSON text, keeping the insertion order of maps.

    NaN and infinities have no JSON form and are rejected instead of
    being written as null.
    """
    _check_finite(value, [])
    try:
        return orjson.dumps(value, option=orjson.OPT_INDENT_2).decode("utf-8")
    except orjson.JSONEncodeError as err:
        raise TypeMismatchError(f"Value can not be serialized: {err}") from err


def parse(text: str | bytes) -> Value:
    try:
        return orjson.loads(text)
    except orjson.JSONDecodeError as err:
        raise ParseError(f"Malformed document: {err}") from err


def _format_path(path: Path) -> str:
    return "".join(f"[{key!r}]" for key in path) or "<root>"


def _child(value: Any, key: Key, path: Path) -> Value:
    if isinstance(value, dict):
        if not isinstance(key, str):
            raise MissingFieldError(
                f"Can not index map at {_format_path(path)} with {key!r}"
            )
        if key not in value:
            raise MissingFieldError(f"Missing field {_format_path([*path, key])}")
        return value[key]
    if isinstance(value, list):
        if isinstance(key, bool) or not isinstance(key, int):
            raise MissingFieldError(
                f"Can not index array at {_format_path(path)} with {key!r}"
            )
        if not -len(value) <= key < len(value):
            raise MissingFieldError(
                f"Index {key} out of range for array at {_format_path(path)}"
            )
        return value[key]
    raise MissingFieldError(
        f"Can not look up {key!r} in {type(value).__name__} "
        f"at {_format_path(path)}"
    )


def get(value: Value, path: Path) -> Value:
    """Follow the keys in path through nested maps and arrays.

    >>> get({"polynomial": {"a": 2}}, ["polynomial", "a"])
    2
    """
    current = value
    for depth, key in enumerate(path):
        current = _child(current, key, path[:depth])
    return current


def set_value(value: Value, path: Path, new: Value) -> None:
    """Replace the value at path. The parent of path must already exist,
    while the last key may be new when the parent is a map."""
    if not path:
        raise MissingFieldError("Can not replace the document root")
    *parent_path, key = path
    parent = get(value, parent_path)
    if isinstance(parent, dict) and isinstance(key, str):
        parent[key] = new
        return
    # arrays are only ever updated in place
    _child(parent, key, parent_path)
    parent[key] = new  # type: ignore[index]
