"""
Type aliases and the value model for traversal functions.

A plain value is one of three kinds:
- Scalar: str, int, float, bool, None, dates, and any other non-container
- Sequence: list/tuple (any Sequence except str, bytes, bytearray)
- Mapping: any Mapping (keys are expected to be strings)

Traversal functions dispatch on kind_of().
"""

from __future__ import annotations

import collections.abc as _abc
import datetime as _datetime
import enum as _enum
import typing as _typing

# Dotted path split into components
# Example: ("config", "model", "name") represents config.model.name
Path: _typing.TypeAlias = tuple[str, ...]

# Opaque date values, copied by timestamp when cloned
DATE_TYPES: tuple[type, ...] = (_datetime.date, _datetime.datetime, _datetime.time)

# Sequences that are really scalars
_TEXT_TYPES = (str, bytes, bytearray)


class InvalidArgumentError(TypeError):
    """Raised when a required argument is not of the expected kind."""

    pass


class Kind(_enum.Enum):
    """The three kinds of plain value."""

    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"


def kind_of(value: _typing.Any) -> Kind:
    """
    Classify a value as scalar, sequence, or mapping.

    Example:
        >>> kind_of({"a": 1})
        <Kind.MAPPING: 'mapping'>
        >>> kind_of([1, 2])
        <Kind.SEQUENCE: 'sequence'>
        >>> kind_of("text")
        <Kind.SCALAR: 'scalar'>
    """
    if isinstance(value, _abc.Mapping):
        return Kind.MAPPING
    if isinstance(value, _abc.Sequence) and not isinstance(value, _TEXT_TYPES):
        return Kind.SEQUENCE
    return Kind.SCALAR


def is_mapping(value: _typing.Any) -> bool:
    """Check if a value is a mapping."""
    return isinstance(value, _abc.Mapping)


def is_sequence(value: _typing.Any) -> bool:
    """Check if a value is a sequence (strings and bytes excluded)."""
    return kind_of(value) is Kind.SEQUENCE


def is_date(value: _typing.Any) -> bool:
    """Check if a value is an opaque date/time value."""
    return isinstance(value, DATE_TYPES)
