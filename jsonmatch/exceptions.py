"""Custom exceptions for jsonmatch."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jsonmatch.mismatch import Mismatch


class JsonMatchError(Exception):
    """Base exception for jsonmatch errors."""


class MismatchError(JsonMatchError, AssertionError):
    """Raised by assert_match when the documents do not match."""

    def __init__(self, mismatch: Mismatch) -> None:
        super().__init__(str(mismatch))
        self.mismatch = mismatch


class PlaceholderValidationError(JsonMatchError, ValueError):
    """Raised by a placeholder validator when the actual value is rejected."""


class ConfigLoadError(JsonMatchError, ValueError):
    """Raised when configuration YAML cannot be parsed or validated."""
