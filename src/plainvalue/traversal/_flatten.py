"""
Conversion between nested mappings and flat dotted-key mappings.

Only mappings are descended into. Sequences and scalars are leaves, so
a list is kept whole under its path rather than being split by index.

Example:
    >>> flatten_object({"a": 1, "b": {"c": 2, "d": {"e": 3}}})
    {'a': 1, 'b.c': 2, 'b.d.e': 3}
    >>> unflatten_object({"a": 1, "b.c": 2, "b.d.e": 3})
    {'a': 1, 'b': {'c': 2, 'd': {'e': 3}}}
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import plainvalue.constants as constants
import plainvalue.traversal._clone as _clone
import plainvalue.traversal._paths as _paths
import plainvalue.traversal._types as _types

_logger = _logging.getLogger(__name__)


def iter_leaves(
    root: _typing.Any,
    prefix: str = "",
) -> _typing.Iterator[tuple[str, _typing.Any]]:
    """
    Yield (dotted_path, value) for every leaf under root, in pre-order.

    Keys of a mapping are visited in iteration order, and each nested
    mapping is fully walked before its next sibling. A non-mapping root
    yields nothing.
    """
    if not _types.is_mapping(root):
        return
    for key, value in root.items():
        path = f"{prefix}{constants.PATH_SEPARATOR}{key}" if prefix else str(key)
        if _types.is_mapping(value):
            yield from iter_leaves(value, path)
        else:
            yield path, value


def flatten_object(root: _typing.Any, prefix: str = "") -> dict[str, _typing.Any]:
    """
    Flatten nested mappings into a single dict keyed by dotted paths.

    Args:
        root: The mapping to flatten. Anything else gives an empty dict.
        prefix: Optional path to prepend to every key.

    Returns:
        New dict of path -> leaf value. Empty nested mappings have no
        leaves and do not appear.
    """
    return dict(iter_leaves(root, prefix))


def get_all_keys(root: _typing.Any, prefix: str = "") -> list[str]:
    """
    List the dotted path of every leaf, in pre-order.

    Example:
        >>> get_all_keys({"a": 1, "b": {"c": 2, "d": {"e": 3}}})
        ['a', 'b.c', 'b.d.e']
    """
    return [path for path, _ in iter_leaves(root, prefix)]


def unflatten_object(flat: _typing.Any) -> dict[str, _typing.Any]:
    """
    Rebuild nested dicts from a mapping of dotted paths.

    Keys are applied in iteration order with set_nested_value(). Values
    are cloned, so the result shares no containers with flat. When
    paths collide, the later key wins: {"a": 1, "a.b": 2} gives
    {"a": {"b": 2}}, while {"a.b": 2, "a": 1} gives {"a": 1}.

    Args:
        flat: Mapping of dotted path -> value. Anything else gives an
            empty dict.

    Returns:
        New nested dict.
    """
    result: dict[str, _typing.Any] = {}
    if not _types.is_mapping(flat):
        return result

    for key, value in flat.items():
        path = str(key)
        if _overwrites_leaf(result, path):
            _logger.debug("Key %r overwrites an earlier value", path)
        _paths.set_nested_value(result, path, _clone.deep_clone(value))
    return result


def _overwrites_leaf(result: dict[str, _typing.Any], path: str) -> bool:
    """Check if setting path would replace a value set by an earlier key."""
    current: _typing.Any = result
    for key in _paths.split_path(path):
        if not isinstance(current, dict):
            return True
        if key not in current:
            return False
        current = current[key]
    return True
