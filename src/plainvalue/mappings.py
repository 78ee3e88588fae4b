"""
Shallow helpers for plain mappings.

These operate on the top level of a mapping only and always return a
new dict. Helpers that need a mapping raise InvalidArgumentError when
given something else; the permissive ones (is_empty, size,
remove_nullish, filter_object) return an empty or neutral result.
"""

import collections.abc as _abc
import typing as _typing

import plainvalue.traversal as traversal


def _require_mapping(value: _typing.Any, what: str = "First argument") -> None:
    if not traversal.is_mapping(value):
        raise traversal.InvalidArgumentError(
            f"{what} must be a mapping, got {type(value).__name__}"
        )


def _require_keys(keys: _typing.Any) -> None:
    if not traversal.is_sequence(keys):
        raise traversal.InvalidArgumentError(
            f"Second argument must be a sequence of keys, got {type(keys).__name__}"
        )


def _require_callable(fn: _typing.Any) -> None:
    if not callable(fn):
        raise traversal.InvalidArgumentError(
            f"Second argument must be callable, got {type(fn).__name__}"
        )


def pick(obj: _abc.Mapping[str, _typing.Any], keys: _abc.Sequence[str]) -> dict[str, _typing.Any]:
    """
    Copy only the given keys (those present in obj).

    Example:
        >>> pick({"a": 1, "b": 2, "c": 3}, ["a", "c"])
        {'a': 1, 'c': 3}
    """
    _require_mapping(obj)
    _require_keys(keys)
    return {key: obj[key] for key in keys if key in obj}


def omit(obj: _abc.Mapping[str, _typing.Any], keys: _abc.Sequence[str]) -> dict[str, _typing.Any]:
    """
    Copy everything except the given keys.

    Example:
        >>> omit({"a": 1, "b": 2, "c": 3}, ["b"])
        {'a': 1, 'c': 3}
    """
    _require_mapping(obj)
    _require_keys(keys)
    excluded = set(keys)
    return {key: value for key, value in obj.items() if key not in excluded}


def is_empty(obj: _typing.Any) -> bool:
    """True only for a mapping with no keys (None and non-mappings are not empty)."""
    return traversal.is_mapping(obj) and len(obj) == 0


def invert(obj: _abc.Mapping[str, _typing.Any]) -> dict[_typing.Any, str]:
    """
    Swap keys and values.

    When several keys share a value, the last one wins. Values must be
    hashable.

    Example:
        >>> invert({"a": 1, "b": 2})
        {1: 'a', 2: 'b'}
    """
    _require_mapping(obj, "Input")
    return {value: key for key, value in obj.items()}


def map_keys(
    obj: _abc.Mapping[str, _typing.Any],
    fn: _typing.Callable[[str], str],
) -> dict[str, _typing.Any]:
    """Copy with every key passed through fn."""
    _require_mapping(obj)
    _require_callable(fn)
    return {fn(key): value for key, value in obj.items()}


def map_values(
    obj: _abc.Mapping[str, _typing.Any],
    fn: _typing.Callable[[_typing.Any], _typing.Any],
) -> dict[str, _typing.Any]:
    """Copy with every value passed through fn."""
    _require_mapping(obj)
    _require_callable(fn)
    return {key: fn(value) for key, value in obj.items()}


def defaults(
    obj: _abc.Mapping[str, _typing.Any],
    fallbacks: _abc.Mapping[str, _typing.Any],
) -> dict[str, _typing.Any]:
    """
    Fill in missing values from fallbacks.

    A key set to None in obj counts as missing.

    Example:
        >>> defaults({"a": 1, "c": None}, {"a": 2, "b": 3, "c": 4})
        {'a': 1, 'b': 3, 'c': 4}
    """
    _require_mapping(obj)
    _require_mapping(fallbacks, "Second argument")
    result = dict(fallbacks)
    result.update((key, value) for key, value in obj.items() if value is not None)
    return result


def remove_nullish(obj: _typing.Any) -> _typing.Any:
    """Copy without None values. Non-mappings are returned unchanged."""
    if not traversal.is_mapping(obj):
        return obj
    return {key: value for key, value in obj.items() if value is not None}


def filter_object(
    obj: _typing.Any,
    predicate: _typing.Any,
) -> dict[str, _typing.Any]:
    """
    Keep the entries for which predicate(value, key, obj) is truthy.

    Returns an empty dict if obj is not a mapping or predicate is not
    callable.
    """
    if not traversal.is_mapping(obj) or not callable(predicate):
        return {}
    return {key: value for key, value in obj.items() if predicate(value, key, obj)}


def size(obj: _typing.Any) -> int:
    """Number of keys in a mapping (0 for anything else)."""
    if not traversal.is_mapping(obj):
        return 0
    return len(obj)


def has(obj: _abc.Mapping[str, _typing.Any], key: str) -> bool:
    """Check whether obj has key at the top level."""
    _require_mapping(obj)
    return key in obj
