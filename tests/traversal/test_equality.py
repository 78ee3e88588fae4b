"""Tests for is_equal."""

import datetime as _datetime
import typing as _typing

import pytest as _pytest

import plainvalue.traversal as traversal


class TestIsEqualMappings:
    """Mapping comparison."""

    def test_equal_nested_mappings(self) -> None:
        """Structurally identical mappings are equal."""
        assert traversal.is_equal({"a": 1, "b": {"c": 2}}, {"a": 1, "b": {"c": 2}}) is True

    def test_different_value(self) -> None:
        """A differing scalar makes mappings unequal."""
        assert traversal.is_equal({"a": 1}, {"a": 2}) is False

    def test_key_order_ignored(self) -> None:
        """Mapping comparison does not depend on key order."""
        assert traversal.is_equal({"a": 1, "b": 2}, {"b": 2, "a": 1}) is True

    def test_extra_key_unequal(self) -> None:
        """Different key counts are unequal."""
        assert traversal.is_equal({"a": 1}, {"a": 1, "b": 2}) is False

    def test_same_size_different_keys_unequal(self) -> None:
        """Same cardinality but different key names are unequal."""
        assert traversal.is_equal({"a": 1}, {"b": 1}) is False

    def test_nested_difference(self) -> None:
        """A difference deep down is found."""
        assert traversal.is_equal({"a": {"b": {"c": 1}}}, {"a": {"b": {"c": 2}}}) is False

    def test_empty_mappings_equal(self) -> None:
        """Two empty mappings are equal."""
        assert traversal.is_equal({}, {}) is True


class TestIsEqualSequences:
    """Sequence comparison."""

    def test_equal_lists(self) -> None:
        """Same elements in the same order are equal."""
        assert traversal.is_equal([1, {"a": [2]}], [1, {"a": [2]}]) is True

    def test_order_matters(self) -> None:
        """Sequences are order dependent."""
        assert traversal.is_equal([1, 2], [2, 1]) is False

    def test_length_matters(self) -> None:
        """A prefix is not equal to the longer sequence."""
        assert traversal.is_equal([1, 2], [1, 2, 3]) is False

    def test_list_and_tuple_equal(self) -> None:
        """Lists and tuples are both sequences."""
        assert traversal.is_equal([1, 2], (1, 2)) is True

    def test_sequences_inside_mappings(self) -> None:
        """Nested sequences are compared element-wise."""
        assert traversal.is_equal({"tags": ["a", "b"]}, {"tags": ["b", "a"]}) is False


class TestIsEqualKinds:
    """Null and kind mismatches."""

    def test_identical_object(self) -> None:
        """The same object is equal to itself."""
        data = {"a": [1, 2]}

        assert traversal.is_equal(data, data) is True

    def test_none_and_none(self) -> None:
        """None equals None."""
        assert traversal.is_equal(None, None) is True

    @_pytest.mark.parametrize("other", [0, "", {}, [], False])
    def test_none_and_falsy(self, other: _typing.Any) -> None:
        """None is not equal to any other falsy value."""
        assert traversal.is_equal(None, other) is False
        assert traversal.is_equal(other, None) is False

    @_pytest.mark.parametrize(
        ("a", "b"),
        [
            ({"0": 1}, [1]),
            ([], {}),
            ("ab", ["a", "b"]),
            (1, [1]),
            ({"a": 1}, "a"),
        ],
    )
    def test_different_kinds_unequal(self, a: _typing.Any, b: _typing.Any) -> None:
        """Scalar, sequence and mapping never compare equal to each other."""
        assert traversal.is_equal(a, b) is False

    def test_bool_not_equal_to_int(self) -> None:
        """Booleans are not numbers."""
        assert traversal.is_equal(True, 1) is False
        assert traversal.is_equal({"flag": False}, {"flag": 0}) is False

    def test_int_equal_to_float(self) -> None:
        """Numbers compare by value."""
        assert traversal.is_equal(1, 1.0) is True

    def test_dates_compare_by_value(self) -> None:
        """Equal timestamps are equal."""
        a = _datetime.datetime(2024, 1, 1, 9, 0)
        b = _datetime.datetime(2024, 1, 1, 9, 0)

        assert traversal.is_equal(a, b) is True
        assert traversal.is_equal(a, _datetime.datetime(2024, 1, 2)) is False
