"""Unit tests for mismatch outcomes."""

from __future__ import annotations

from jsonmatch.mismatch import (
    ArrayLengthMismatch,
    MismatchKind,
    MissingKey,
    PlaceholderFailed,
    UnknownKey,
    ValuesNotEqual,
)


def test_with_key_sets_context_once() -> None:
    inner = MissingKey(name="x").with_key("inner")
    outer = inner.with_key("outer")
    assert outer.key == "inner"
    assert str(outer) == 'mismatch under key inner: key "x" is not present in actual JSON: missing key'


def test_with_key_returns_new_instance() -> None:
    original = UnknownKey(name="x")
    keyed = original.with_key("k")
    assert original.key is None
    assert keyed.key == "k"


def test_kind_is_exposed_per_class() -> None:
    assert ArrayLengthMismatch(expected_length=1, actual_length=2).kind is MismatchKind.ARRAY_LENGTH
    assert ValuesNotEqual(expected=1, actual=2).kind is MismatchKind.NOT_EQUAL
    assert PlaceholderFailed(marker="$M", reason="r").kind is MismatchKind.PLACEHOLDER_FAILED


def test_values_not_equal_quotes_strings_only() -> None:
    assert str(ValuesNotEqual(expected=2, actual="hex")) == 'value 2 and "hex": values are not equal'
    assert str(ValuesNotEqual(expected=None, actual=False)) == "value null and false: values are not equal"
