"""Tests for deep_clone."""

import datetime as _datetime
import typing as _typing

import pytest as _pytest

import plainvalue.traversal as traversal


class TestDeepCloneScalars:
    """Scalars are returned by value."""

    @_pytest.mark.parametrize("value", [42, 3.5, "hello", True, False, None, b"raw"])
    def test_scalar_returned_unchanged(self, value: _typing.Any) -> None:
        """Scalars come back equal (and immutable, so sharing is harmless)."""
        assert traversal.deep_clone(value) == value

    def test_datetime_is_new_object_with_same_timestamp(self) -> None:
        """Dates are copied by timestamp."""
        original = _datetime.datetime(2024, 5, 17, 12, 30, 15, tzinfo=_datetime.timezone.utc)

        cloned = traversal.deep_clone(original)

        assert cloned == original
        assert cloned.timestamp() == original.timestamp()
        assert type(cloned) is _datetime.datetime

    def test_bytearray_is_copied(self) -> None:
        """Mutable bytes are not shared with the original."""
        original = bytearray(b"abc")

        cloned = traversal.deep_clone(original)

        assert cloned == original
        assert cloned is not original

    def test_date_is_cloned(self) -> None:
        """Plain dates are cloned too."""
        original = _datetime.date(2024, 1, 31)

        assert traversal.deep_clone(original) == original


class TestDeepCloneContainers:
    """Mappings and sequences are copied recursively."""

    def test_nested_mapping_equal_but_not_shared(self) -> None:
        """Clone is equal to the original but shares no nodes."""
        original = {"a": 1, "b": {"c": 2}}

        cloned = traversal.deep_clone(original)

        assert cloned == original
        assert cloned is not original
        assert cloned["b"] is not original["b"]

    def test_mutating_clone_leaves_original_untouched(self, nested_data: dict[str, _typing.Any]) -> None:
        """Writes to any nested container of the clone do not leak back."""
        cloned = traversal.deep_clone(nested_data)

        cloned["b"]["d"]["e"] = 99
        cloned["tags"].append("z")
        cloned["new"] = "value"

        assert nested_data["b"]["d"]["e"] == 3
        assert nested_data["tags"] == ["x", "y"]
        assert "new" not in nested_data

    def test_mutating_original_leaves_clone_untouched(self) -> None:
        """Writes to the original do not reach the clone."""
        original = {"items": [{"id": 1}]}
        cloned = traversal.deep_clone(original)

        original["items"][0]["id"] = 2

        assert cloned["items"][0]["id"] == 1

    def test_sequence_order_preserved(self) -> None:
        """Sequence elements keep their order."""
        original = [3, 1, {"k": [2, 2]}]

        cloned = traversal.deep_clone(original)

        assert cloned == [3, 1, {"k": [2, 2]}]
        assert cloned[2] is not original[2]
        assert cloned[2]["k"] is not original[2]["k"]

    def test_tuple_becomes_list(self) -> None:
        """Sequences are cloned into lists."""
        assert traversal.deep_clone((1, (2, 3))) == [1, [2, 3]]

    def test_string_is_not_split(self) -> None:
        """Strings are scalars, not sequences."""
        assert traversal.deep_clone({"s": "abc"}) == {"s": "abc"}

    def test_mapping_key_order_preserved(self) -> None:
        """Keys keep the source iteration order."""
        original = {"z": 1, "a": 2, "m": 3}

        assert list(traversal.deep_clone(original)) == ["z", "a", "m"]

    def test_clone_is_structurally_equal(self, nested_data: dict[str, _typing.Any]) -> None:
        """Clone passes is_equal against the original."""
        assert traversal.is_equal(traversal.deep_clone(nested_data), nested_data)

    def test_empty_containers(self) -> None:
        """Empty containers clone to new empty containers."""
        empty_map: dict[str, _typing.Any] = {}
        empty_list: list[_typing.Any] = []

        assert traversal.deep_clone(empty_map) == {}
        assert traversal.deep_clone(empty_map) is not empty_map
        assert traversal.deep_clone(empty_list) is not empty_list


class TestDeepCloneCycles:
    """No cycle detection."""

    def test_cyclic_mapping_raises_recursion_error(self) -> None:
        """A self-referencing mapping fails fast instead of looping silently."""
        cyclic: dict[str, _typing.Any] = {"a": 1}
        cyclic["self"] = cyclic

        with _pytest.raises(RecursionError):
            traversal.deep_clone(cyclic)
