"""JSON value model used by the comparator.

Decoded documents are plain Python containers as produced by ``json.loads``.
``kind_of`` gives every value an explicit tag so dispatch never relies on
Python's own truthiness or ``bool``/``int`` overlap.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import TypeAlias, cast

JSONScalar: TypeAlias = str | int | float | bool | None
JSONValue: TypeAlias = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]
JSONObject: TypeAlias = dict[str, JSONValue]
JSONArray: TypeAlias = list[JSONValue]


class JsonKind(str, Enum):
    """Shape of a decoded JSON value."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"


def kind_of(value: object) -> JsonKind:
    """Classify a decoded value.

    Raises:
        TypeError: value is not something ``json.loads`` can produce.
    """
    if value is None:
        return JsonKind.NULL
    # bool is a subclass of int, test it first
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, list):
        return JsonKind.ARRAY
    if isinstance(value, dict):
        return JsonKind.OBJECT
    raise TypeError(f"Unsupported JSON type: {type(value).__name__}")


def is_number(value: object) -> bool:
    """Return True for JSON numbers (int or float, never bool)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def numbers_equal(expected: int | float, actual: int | float) -> bool:
    """Compare as float64, so 2**53 + 1 equals 2**53 as JSON decoders see it."""
    try:
        return float(expected) == float(actual)
    except OverflowError:
        # ints beyond the float range
        return expected == actual


def deep_equal(expected: JSONValue, actual: JSONValue) -> bool:
    """Order-sensitive structural equality over one numeric domain."""
    kind = kind_of(expected)
    if kind is not kind_of(actual):
        return False
    if isinstance(expected, list) and isinstance(actual, list):
        if len(expected) != len(actual):
            return False
        return all(deep_equal(e, a) for e, a in zip(expected, actual))
    if isinstance(expected, dict) and isinstance(actual, dict):
        if expected.keys() != actual.keys():
            return False
        return all(deep_equal(value, actual[key]) for key, value in expected.items())
    if kind is JsonKind.NUMBER:
        return numbers_equal(cast(float, expected), cast(float, actual))
    return expected == actual


def to_json_text(value: JSONValue) -> str:
    """Compact JSON text used inside mismatch messages."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
