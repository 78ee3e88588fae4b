"""
Deep merge of plain mappings.

Merging is a left-to-right fold starting from an empty dict. Nested
mappings accumulate keys from every argument; sequences and scalars
replace whatever was there before (lists are never combined).

Example:
    >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}, "e": 4})
    {'a': 1, 'b': {'c': 2, 'd': 3}, 'e': 4}
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import plainvalue.traversal._types as _types

_logger = _logging.getLogger(__name__)


def deep_merge(*values: _typing.Any) -> dict[str, _typing.Any]:
    """
    Deep merge any number of mappings into a new dict.

    Later arguments take precedence on conflicting keys. When both the
    accumulated value and the incoming value at a key are mappings, they
    are merged recursively. Any other incoming value replaces the
    accumulated one wholesale.

    Non-mapping arguments are skipped. No argument is mutated, and every
    mapping node in the result is a new dict. Leaf values (scalars and
    sequences) are placed in the result as-is, not copied.

    Args:
        *values: Values to merge, lowest precedence first.

    Returns:
        The merged dict.
    """
    merged: dict[str, _typing.Any] = {}
    for position, value in enumerate(values):
        if not _types.is_mapping(value):
            _logger.debug(
                "Skipping non-mapping merge argument %d (%s)",
                position,
                type(value).__name__,
            )
            continue
        _merge_into(merged, value)
    return merged


def _merge_into(
    target: dict[str, _typing.Any],
    source: _typing.Mapping[str, _typing.Any],
) -> None:
    """Merge source into target (target is owned by the caller)."""
    for key, incoming in source.items():
        if _types.is_mapping(incoming):
            existing = target.get(key)
            # Every dict already in target was created by this merge
            nested = existing if isinstance(existing, dict) else {}
            _merge_into(nested, incoming)
            target[key] = nested
        else:
            target[key] = incoming
