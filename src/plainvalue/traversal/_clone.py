"""
Deep copy of plain values.

Every mapping and sequence node in the result is new, so mutating the
clone never affects the original (and vice versa). There is no cycle
detection: a container that contains itself raises RecursionError.
"""

from __future__ import annotations

import typing as _typing

import plainvalue.traversal._types as _types


def deep_clone(value: _typing.Any) -> _typing.Any:
    """
    Recursively copy a plain value.

    - Mappings become new dicts with each value cloned
    - Sequences become new lists with each element cloned (order kept)
    - Dates become new equal date objects
    - bytearrays are copied
    - Other scalars are returned as-is (they are immutable)

    Args:
        value: Any plain value.

    Returns:
        An independent copy of value.

    Example:
        >>> original = {"a": 1, "b": {"c": [1, 2]}}
        >>> cloned = deep_clone(original)
        >>> cloned["b"]["c"].append(3)
        >>> original["b"]["c"]
        [1, 2]
    """
    kind = _types.kind_of(value)
    if kind is _types.Kind.MAPPING:
        return {key: deep_clone(item) for key, item in value.items()}
    if kind is _types.Kind.SEQUENCE:
        return [deep_clone(item) for item in value]
    if isinstance(value, bytearray):
        return bytearray(value)
    if _types.is_date(value):
        # replace() with no arguments builds a new object with the same timestamp
        return value.replace()
    return value
