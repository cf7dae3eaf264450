"""Placeholders: expected-side markers that request a check instead of equality.

A placeholder pairs a marker string with a validator. When the expected
document holds a string equal to a registered marker, the validator runs
against the actual value; it rejects the value by raising
``PlaceholderValidationError``.

Example::

    @placeholder("$GTE_3")
    def gte_3(value):
        if not is_number(value) or value < 3:
            raise PlaceholderValidationError(f"{value!r} is not greater or equal than 3")

    match(b'{"value": "$GTE_3"}', b'{"value": 4}', gte_3, not_empty("$NOT_EMPTY"))
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime

from jsonmatch.exceptions import PlaceholderValidationError
from jsonmatch.mismatch import PlaceholderFailed
from jsonmatch.values import JSONValue, JsonKind, kind_of, to_json_text

logger = logging.getLogger(__name__)

Validator = Callable[[JSONValue], None]

RFC3339 = "%Y-%m-%dT%H:%M:%S%z"
RFC3339_FRACTION = "%Y-%m-%dT%H:%M:%S.%f%z"
DATE_ONLY = "%Y-%m-%d"

# RFC 3339 allows optional fractional seconds (up to microseconds here)
_LAYOUT_VARIANTS: dict[str, tuple[str, ...]] = {
    RFC3339: (RFC3339, RFC3339_FRACTION),
}


@dataclass(frozen=True)
class Placeholder:
    """A marker string bound to a validator for the actual value."""

    marker: str
    validate: Validator

    def check(self, actual: JSONValue) -> PlaceholderFailed | None:
        """Run the validator and translate a rejection into a mismatch."""
        try:
            self.validate(actual)
        except PlaceholderValidationError as exc:
            return PlaceholderFailed(marker=self.marker, reason=str(exc))
        return None


class PlaceholderSet:
    """Ordered placeholders registered for one comparison call."""

    def __init__(self, placeholders: Iterable[Placeholder] = ()) -> None:
        self._placeholders: tuple[Placeholder, ...] = tuple(placeholders)

    def __len__(self) -> int:
        return len(self._placeholders)

    def __iter__(self) -> Iterator[Placeholder]:
        return iter(self._placeholders)

    def lookup(self, expected: JSONValue) -> Placeholder | None:
        """Return the first placeholder whose marker equals ``expected``."""
        if not isinstance(expected, str):
            return None
        for item in self._placeholders:
            if item.marker == expected:
                return item
        return None

    def resolve(self, expected: JSONValue, actual: JSONValue) -> tuple[bool, PlaceholderFailed | None]:
        """Check ``actual`` through the placeholder claiming ``expected``.

        Returns:
            ``(claimed, mismatch)``. ``claimed`` is False when no placeholder
            applies and the caller must fall back to literal comparison.
        """
        item = self.lookup(expected)
        if item is None:
            return False, None
        logger.debug("Placeholder %s claimed expected value", item.marker)
        return True, item.check(actual)


def custom(marker: str, validate: Validator) -> Placeholder:
    """Build a placeholder from an arbitrary validator."""
    return Placeholder(marker=marker, validate=validate)


def placeholder(marker: str) -> Callable[[Validator], Placeholder]:
    """Decorator form of ``custom``."""

    def decorator(validate: Validator) -> Placeholder:
        return custom(marker, validate)

    return decorator


def is_empty(value: JSONValue) -> bool:
    """True for null and the zero value of every other shape."""
    kind = kind_of(value)
    if kind is JsonKind.NULL:
        return True
    if kind in (JsonKind.STRING, JsonKind.ARRAY, JsonKind.OBJECT):
        return len(value) == 0  # type: ignore[arg-type]
    # False, 0 and 0.0
    return not value


def not_empty(marker: str) -> Placeholder:
    """Actual value must not be null or empty."""

    def validate(value: JSONValue) -> None:
        if is_empty(value):
            raise PlaceholderValidationError("expected value to be not empty, but it was")

    return custom(marker, validate)


def regexp(marker: str, pattern: str | re.Pattern[str]) -> Placeholder:
    """Actual value must be a string in which ``pattern`` finds a match."""
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def validate(value: JSONValue) -> None:
        if not isinstance(value, str):
            raise PlaceholderValidationError(
                f"cannot match, value is of type {kind_of(value).value} - not a string"
            )
        if compiled.search(value) is None:
            raise PlaceholderValidationError(f"value {value} does not match with regexp {compiled.pattern}")

    return custom(marker, validate)


def time_layout(marker: str, layout: str) -> Placeholder:
    """Actual value must be a string parseable by ``datetime.strptime`` with ``layout``.

    ``RFC3339`` also accepts an optional fraction of a second.
    """
    layouts = _LAYOUT_VARIANTS.get(layout, (layout,))

    def validate(value: JSONValue) -> None:
        if not isinstance(value, str):
            raise PlaceholderValidationError(
                f"cannot parse time, value is of type {kind_of(value).value} - not a string"
            )
        for candidate in layouts:
            try:
                datetime.strptime(value, candidate)
            except ValueError:
                continue
            return
        raise PlaceholderValidationError(
            f"cannot parse layout {to_json_text(layout)} with {to_json_text(value)}"
        )

    return custom(marker, validate)
