"""jsonmatch: structural JSON comparison with placeholders."""

from jsonmatch.comparator import assert_match, compare, decode, match
from jsonmatch.exceptions import (
    ConfigLoadError,
    JsonMatchError,
    MismatchError,
    PlaceholderValidationError,
)
from jsonmatch.mismatch import (
    ArrayLengthMismatch,
    Mismatch,
    MismatchKind,
    MissingKey,
    PlaceholderFailed,
    UnknownKey,
    UnmatchedElement,
    ValuesNotEqual,
)
from jsonmatch.placeholders import (
    DATE_ONLY,
    RFC3339,
    RFC3339_FRACTION,
    Placeholder,
    PlaceholderSet,
    custom,
    not_empty,
    placeholder,
    regexp,
    time_layout,
)
from jsonmatch.values import JsonKind, is_number, kind_of

__all__ = [
    "ArrayLengthMismatch",
    "ConfigLoadError",
    "DATE_ONLY",
    "JsonKind",
    "JsonMatchError",
    "Mismatch",
    "MismatchError",
    "MismatchKind",
    "MissingKey",
    "Placeholder",
    "PlaceholderFailed",
    "PlaceholderSet",
    "PlaceholderValidationError",
    "RFC3339",
    "RFC3339_FRACTION",
    "UnknownKey",
    "UnmatchedElement",
    "ValuesNotEqual",
    "assert_match",
    "compare",
    "custom",
    "decode",
    "is_number",
    "kind_of",
    "match",
    "not_empty",
    "placeholder",
    "regexp",
    "time_layout",
]
