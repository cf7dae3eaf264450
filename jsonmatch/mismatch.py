"""Structured comparison outcomes.

A comparison returns ``None`` on success or exactly one ``Mismatch``. Each
error kind is its own frozen dataclass so callers can dispatch with
``isinstance`` or ``match`` on the class instead of parsing message text.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import ClassVar

from jsonmatch.values import JSONArray, JSONValue, to_json_text


class MismatchKind(str, Enum):
    """Error taxonomy for a failed comparison."""

    MISSING_KEY = "missing_key"
    UNKNOWN_KEY = "unknown_key"
    ARRAY_LENGTH = "array_length"
    UNMATCHED_ELEMENT = "unmatched_element"
    NOT_EQUAL = "not_equal"
    PLACEHOLDER_FAILED = "placeholder_failed"


@dataclass(frozen=True)
class Mismatch:
    """First discrepancy found between expected and actual documents."""

    kind: ClassVar[MismatchKind]
    key: str | None = field(default=None, kw_only=True)

    def describe(self) -> str:
        """Kind-specific message without key context."""
        raise NotImplementedError

    def with_key(self, key: str) -> Mismatch:
        """Attach key context unless a deeper key was already recorded."""
        if self.key is not None:
            return self
        return replace(self, key=key)

    def __str__(self) -> str:
        if self.key is not None:
            return f"mismatch under key {self.key}: {self.describe()}"
        return self.describe()


@dataclass(frozen=True)
class MissingKey(Mismatch):
    kind: ClassVar[MismatchKind] = MismatchKind.MISSING_KEY

    name: str

    def describe(self) -> str:
        return f"key {to_json_text(self.name)} is not present in actual JSON: missing key"


@dataclass(frozen=True)
class UnknownKey(Mismatch):
    kind: ClassVar[MismatchKind] = MismatchKind.UNKNOWN_KEY

    name: str

    def describe(self) -> str:
        return f"key {to_json_text(self.name)} is only present in actual JSON: unknown key"


@dataclass(frozen=True)
class ArrayLengthMismatch(Mismatch):
    kind: ClassVar[MismatchKind] = MismatchKind.ARRAY_LENGTH

    expected_length: int
    actual_length: int

    def describe(self) -> str:
        return (
            f"mismatch array length {self.expected_length} and {self.actual_length}: "
            "array lengths are not equal"
        )


@dataclass(frozen=True)
class UnmatchedElement(Mismatch):
    """An expected array element found no partner among the remaining actual elements."""

    kind: ClassVar[MismatchKind] = MismatchKind.UNMATCHED_ELEMENT

    element: JSONValue
    expected_array: JSONArray
    actual_array: JSONArray

    def describe(self) -> str:
        return (
            f"element {to_json_text(self.element)} of expected array "
            f"{to_json_text(self.expected_array)} has no match in actual array "
            f"{to_json_text(self.actual_array)}: array element not matched"
        )


@dataclass(frozen=True)
class ValuesNotEqual(Mismatch):
    kind: ClassVar[MismatchKind] = MismatchKind.NOT_EQUAL

    expected: JSONValue
    actual: JSONValue

    def describe(self) -> str:
        return f"value {to_json_text(self.expected)} and {to_json_text(self.actual)}: values are not equal"


@dataclass(frozen=True)
class PlaceholderFailed(Mismatch):
    kind: ClassVar[MismatchKind] = MismatchKind.PLACEHOLDER_FAILED

    marker: str
    reason: str

    def describe(self) -> str:
        return f"placeholder {self.marker} match failed: {self.reason}"
