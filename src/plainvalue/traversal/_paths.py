"""
Dot-path access into nested mappings.

Paths are strings such as "user.address.city". The separator is always
"." and a key that itself contains "." cannot be addressed.

Example:
    >>> data = {"a": {"b": 1}}
    >>> set_nested_value(data, "a.c.d", 42)
    {'a': {'b': 1, 'c': {'d': 42}}}
    >>> get_nested_value(data, "a.c.d")
    42
    >>> get_nested_value(data, "a.x", "default")
    'default'
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import plainvalue.constants as constants
import plainvalue.traversal._types as _types


class _MissingType:
    """Sentinel type for a path that does not resolve."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


_MISSING = _MissingType()


def split_path(path: str) -> _types.Path:
    """
    Split a dotted path into its components.

    Example:
        >>> split_path("a.b.c")
        ('a', 'b', 'c')
    """
    return tuple(path.split(constants.PATH_SEPARATOR))


def join_path(components: _typing.Iterable[str]) -> str:
    """Join path components with the separator."""
    return constants.PATH_SEPARATOR.join(components)


def get_nested_value(
    root: _typing.Any,
    path: _typing.Any,
    fallback: _typing.Any = None,
) -> _typing.Any:
    """
    Read the value at a dotted path.

    Walks root one component at a time, descending only while the
    current node is a mapping that contains the component with a value
    that is not None. The walk stops at the first failure.

    Note:
        A key that is present with the value None is indistinguishable
        from a missing key: both return fallback.

    Args:
        root: The value to read from.
        path: Dotted path. A non-string path returns fallback.
        fallback: Returned when the path does not resolve.

    Returns:
        The value at the path, or fallback.
    """
    if not isinstance(path, str):
        return fallback

    current = root
    for key in split_path(path):
        if not _types.is_mapping(current) or key not in current:
            return fallback
        current = current[key]
        if current is None:
            return fallback
    return current


def set_nested_value(
    root: _abc.MutableMapping[str, _typing.Any],
    path: str,
    value: _typing.Any,
) -> _abc.MutableMapping[str, _typing.Any]:
    """
    Set the value at a dotted path, creating intermediate dicts.

    Every component except the last must lead to a mapping. Where a
    component is missing or holds a non-mapping value, it is replaced
    with a new empty dict before descending.

    The root is modified in place and returned (the same object).

    Args:
        root: The mapping to modify.
        path: Dotted path to the target key.
        value: The value to store.

    Returns:
        root.

    Raises:
        InvalidArgumentError: If root is not a mutable mapping or path is
            not a string.
    """
    if not isinstance(root, _abc.MutableMapping):
        raise _types.InvalidArgumentError(
            f"root must be a mutable mapping, got {type(root).__name__}"
        )
    if not isinstance(path, str):
        raise _types.InvalidArgumentError(
            f"path must be a string, got {type(path).__name__}"
        )

    *parents, last_key = split_path(path)
    current = root
    for key in parents:
        if key not in current or not isinstance(current[key], _abc.MutableMapping):
            current[key] = {}
        current = current[key]

    current[last_key] = value
    return root


def has_path(root: _typing.Any, path: _typing.Any) -> bool:
    """
    Check whether a dotted path resolves to a value.

    Follows get_nested_value(), so a path ending at None is reported as
    absent.
    """
    if root is None or not isinstance(path, str):
        return False
    return get_nested_value(root, path, _MISSING) is not _MISSING
