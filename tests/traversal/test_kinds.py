"""Tests for the plain value model (Kind, kind_of)."""

import collections as _collections
import datetime as _datetime
import types as _types
import typing as _typing

import pytest as _pytest

import plainvalue.traversal as traversal


class TestKindOf:
    """Classification into scalar, sequence and mapping."""

    @_pytest.mark.parametrize(
        "value",
        [
            {},
            {"a": 1},
            _collections.OrderedDict(a=1),
            _types.MappingProxyType({"a": 1}),
        ],
    )
    def test_mappings(self, value: _typing.Any) -> None:
        """Any Mapping is a mapping."""
        assert traversal.kind_of(value) is traversal.Kind.MAPPING
        assert traversal.is_mapping(value)

    @_pytest.mark.parametrize("value", [[], [1, 2], (1,), ()])
    def test_sequences(self, value: _typing.Any) -> None:
        """Lists and tuples are sequences."""
        assert traversal.kind_of(value) is traversal.Kind.SEQUENCE
        assert traversal.is_sequence(value)

    @_pytest.mark.parametrize(
        "value",
        [
            "text",
            b"bytes",
            bytearray(b"x"),
            0,
            1.5,
            True,
            None,
            _datetime.date(2024, 1, 1),
            {1, 2},
        ],
    )
    def test_scalars(self, value: _typing.Any) -> None:
        """Everything else, including strings, is a scalar."""
        assert traversal.kind_of(value) is traversal.Kind.SCALAR
        assert not traversal.is_mapping(value)
        assert not traversal.is_sequence(value)
