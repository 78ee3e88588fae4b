"""
Deep structural equality for plain values.
"""

from __future__ import annotations

import typing as _typing

import plainvalue.traversal._types as _types


def is_equal(a: _typing.Any, b: _typing.Any) -> bool:
    """
    Compare two plain values structurally.

    - Identical objects are equal
    - None is only equal to None
    - Values of different kinds (scalar/sequence/mapping) are unequal
    - Mappings are equal if they have the same keys and equal values,
      regardless of key order
    - Sequences are equal if they have the same length and equal
      elements in the same order
    - Scalars compare with ==, except that bools only equal bools

    There is no cycle protection.

    Example:
        >>> is_equal({"a": 1, "b": {"c": 2}}, {"b": {"c": 2}, "a": 1})
        True
        >>> is_equal([1, 2], [2, 1])
        False
    """
    if a is b:
        return True
    if a is None or b is None:
        return False

    kind = _types.kind_of(a)
    if kind is not _types.kind_of(b):
        return False

    if kind is _types.Kind.MAPPING:
        if len(a) != len(b):
            return False
        for key in a:
            if key not in b:
                return False
            if not is_equal(a[key], b[key]):
                return False
        return True

    if kind is _types.Kind.SEQUENCE:
        if len(a) != len(b):
            return False
        return all(is_equal(x, y) for x, y in zip(a, b))

    if isinstance(a, bool) != isinstance(b, bool):
        return False
    return bool(a == b)
