"""Tests for the named-scalar partition shared by training and extra values."""

import math

import pytest

from rbparams.params import (
    ParameterNotFoundError,
    ParameterValidationError,
    ScalarPartition,
    format_scalar,
)


def test_set_then_get_returns_value():
    partition = ScalarPartition()
    partition.set("mu", 0.25)
    assert partition.has("mu")
    assert partition.get("mu") == 0.25
    assert len(partition) == 1


def test_overwrite_keeps_size():
    partition = ScalarPartition(values={"mu": 1.0})
    partition.set("mu", 2.0)
    assert len(partition) == 1
    assert partition.get("mu") == 2.0


def test_missing_name_raises_with_label():
    partition = ScalarPartition("extra parameter")
    with pytest.raises(ParameterNotFoundError) as exc_info:
        partition.get("absent")
    assert exc_info.value.name == "absent"
    assert exc_info.value.partition == "extra parameter"
    assert str(exc_info.value) == "No extra parameter named 'absent'"


def test_missing_name_is_a_key_error():
    with pytest.raises(KeyError):
        ScalarPartition().get("absent")


def test_default_returned_for_missing_name():
    partition = ScalarPartition()
    assert partition.get("absent", -1.0) == -1.0
    assert partition.get("absent", None) is None


def test_erase_absent_is_noop():
    partition = ScalarPartition(values={"a": 1.0})
    partition.erase("b")
    partition.erase("a")
    partition.erase("a")
    assert len(partition) == 0


def test_values_are_stored_as_float():
    partition = ScalarPartition()
    partition.set("n", 3)
    value = partition.get("n")
    assert isinstance(value, float)
    assert value == 3.0


def test_non_finite_values_are_kept():
    partition = ScalarPartition()
    partition.set("inf", float("inf"))
    partition.set("nan", float("nan"))
    assert partition.get("inf") == math.inf
    assert math.isnan(partition.get("nan"))


def test_items_sorted_by_name():
    partition = ScalarPartition(values={"b": 2.0, "c": 3.0, "a": 1.0})
    assert [name for name, _ in partition.items()] == ["a", "b", "c"]


def test_items_is_a_snapshot():
    partition = ScalarPartition(values={"a": 1.0, "b": 2.0})
    iterator = partition.items()
    partition.set("c", 3.0)
    partition.erase("a")
    assert list(iterator) == [("a", 1.0), ("b", 2.0)]


def test_names_is_a_copy():
    partition = ScalarPartition(values={"a": 1.0})
    names = partition.names()
    names.add("b")
    assert not partition.has("b")


def test_equality_compares_names_and_values():
    left = ScalarPartition(values={"a": 1.0, "b": 2.0})
    assert left == ScalarPartition(values={"b": 2.0, "a": 1.0})
    assert left != ScalarPartition(values={"a": 1.0, "b": 2.5})
    assert left != ScalarPartition(values={"a": 1.0, "c": 2.0})
    assert left != ScalarPartition(values={"a": 1.0})


def test_copy_is_independent():
    original = ScalarPartition(values={"a": 1.0})
    duplicate = original.copy()
    duplicate.set("a", 5.0)
    assert original.get("a") == 1.0
    assert duplicate.label == original.label


def test_take_empties_source():
    source = ScalarPartition(values={"a": 1.0})
    moved = source.take()
    assert len(source) == 0
    assert moved.get("a") == 1.0


def test_format_lines():
    partition = ScalarPartition(values={"mu_1": 2.0, "mu_0": 0.1})
    assert partition.format_lines(3) == ["mu_0=1.000e-01", "mu_1=2.000e+00"]


def test_format_lines_rejects_negative_precision():
    with pytest.raises(ParameterValidationError):
        ScalarPartition(values={"a": 1.0}).format_lines(-1)


@pytest.mark.parametrize(
    "value, precision, expected",
    [
        (0.1, 6, "1.000000e-01"),
        (2.0, 0, "2e+00"),
        (-12345.678, 2, "-1.23e+04"),
        (0.0, 1, "0.0e+00"),
    ],
)
def test_format_scalar(value, precision, expected):
    assert format_scalar(value, precision) == expected
