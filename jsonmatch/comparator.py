"""Structural comparison of an expected JSON document against an actual one.

The walk is depth-first and stops at the first discrepancy. Objects must have
identical key sets. Arrays are compared as multisets: each expected element
consumes the first remaining actual element it matches, left to right. This
greedy first-fit pairing is intentional and can reject an order that an
optimal bipartite matcher would accept when distinguishable duplicates are
present.

Cost is O(n^2) element comparisons per array and recursion depth equals the
document nesting depth; no limits are imposed.
"""

from __future__ import annotations

import json
import logging
import re
from collections.abc import Iterable

from jsonmatch.exceptions import MismatchError
from jsonmatch.mismatch import (
    ArrayLengthMismatch,
    Mismatch,
    MissingKey,
    UnknownKey,
    UnmatchedElement,
    ValuesNotEqual,
)
from jsonmatch.placeholders import Placeholder, PlaceholderSet
from jsonmatch.values import JSONArray, JSONObject, JSONValue, deep_equal

logger = logging.getLogger(__name__)

Payload = str | bytes | bytearray


def match(expected: Payload, actual: Payload, *placeholders: Placeholder) -> Mismatch | None:
    """Decode two JSON payloads and compare them.

    Raises:
        json.JSONDecodeError: either payload is not valid JSON. The
            comparison is not attempted.
    """
    exp = decode(expected)
    act = decode(actual)
    return compare(exp, act, placeholders)


def assert_match(expected: Payload, actual: Payload, *placeholders: Placeholder) -> None:
    """Like ``match`` but raise ``MismatchError`` on the first discrepancy."""
    mismatch = match(expected, actual, *placeholders)
    if mismatch is not None:
        raise MismatchError(mismatch)


def decode(payload: Payload) -> JSONValue:
    """Decode a JSON payload, rejecting NaN and Infinity literals.

    Raises:
        json.JSONDecodeError: malformed JSON or a non-standard constant.
    """
    if isinstance(payload, (bytes, bytearray)):
        text = payload.decode(json.detect_encoding(payload), "surrogatepass")
    else:
        text = payload
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except _RejectedConstant as exc:
        raise json.JSONDecodeError(
            f"Invalid JSON constant {exc.name}", text, _constant_position(text, exc.name)
        ) from None


class _RejectedConstant(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name


def _reject_constant(name: str) -> JSONValue:
    raise _RejectedConstant(name)


def _constant_position(text: str, name: str) -> int:
    """Offset of the first bare ``name`` token, skipping string literals."""
    for found in re.finditer(r'"(?:[^"\\]|\\.)*"|' + re.escape(name), text):
        if not found.group().startswith('"'):
            return found.start()
    return 0


def compare(
    expected: JSONValue,
    actual: JSONValue,
    placeholders: Iterable[Placeholder] | PlaceholderSet = (),
) -> Mismatch | None:
    """Compare two decoded documents and return the first mismatch, if any."""
    registry = placeholders if isinstance(placeholders, PlaceholderSet) else PlaceholderSet(placeholders)
    mismatch = _compare(expected, actual, registry)
    if mismatch is not None:
        logger.debug("Documents differ: %s", mismatch)
    return mismatch


def _compare(expected: JSONValue, actual: JSONValue, placeholders: PlaceholderSet) -> Mismatch | None:
    if isinstance(expected, list) and isinstance(actual, list):
        return _compare_arrays(expected, actual, placeholders)
    if isinstance(expected, dict) and isinstance(actual, dict):
        return _compare_objects(expected, actual, placeholders)
    return _compare_values(expected, actual, placeholders)


def _compare_objects(expected: JSONObject, actual: JSONObject, placeholders: PlaceholderSet) -> Mismatch | None:
    for key in actual:
        if key not in expected:
            return UnknownKey(name=key)
    for key in expected:
        if key not in actual:
            return MissingKey(name=key)
    for key, value in expected.items():
        mismatch = _compare(value, actual[key], placeholders)
        if mismatch is not None:
            return mismatch.with_key(key)
    return None


def _compare_arrays(expected: JSONArray, actual: JSONArray, placeholders: PlaceholderSet) -> Mismatch | None:
    if len(expected) != len(actual):
        return ArrayLengthMismatch(expected_length=len(expected), actual_length=len(actual))
    consumed = [False] * len(actual)
    for element in expected:
        for index, candidate in enumerate(actual):
            if consumed[index]:
                continue
            if _compare(element, candidate, placeholders) is None:
                consumed[index] = True
                break
        else:
            return UnmatchedElement(element=element, expected_array=expected, actual_array=actual)
    return None


def _compare_values(expected: JSONValue, actual: JSONValue, placeholders: PlaceholderSet) -> Mismatch | None:
    claimed, mismatch = placeholders.resolve(expected, actual)
    if claimed:
        return mismatch
    if not deep_equal(expected, actual):
        return ValuesNotEqual(expected=expected, actual=actual)
    return None
