"""Configuration models for jsonmatch."""

from __future__ import annotations

import re
from enum import Enum
from typing import cast

from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from jsonmatch.placeholders import Placeholder, not_empty, regexp, time_layout


class PlaceholderKind(str, Enum):
    """Built-in placeholder kinds that can be declared in configuration."""

    NOT_EMPTY = "not_empty"
    REGEXP = "regexp"
    TIME_LAYOUT = "time_layout"


class PlaceholderConfig(BaseModel):
    """One placeholder declaration."""

    marker: str = Field(min_length=1, description="Expected-side marker string, e.g. $UUID.")
    kind: PlaceholderKind
    pattern: str | None = Field(default=None, description="Regular expression for kind=regexp.")
    layout: str | None = Field(default=None, description="strptime layout for kind=time_layout.")

    @model_validator(mode="after")
    def _check_arguments(self) -> PlaceholderConfig:
        if self.kind is PlaceholderKind.REGEXP and not self.pattern:
            raise ValueError(f"placeholder {self.marker}: kind regexp requires pattern")
        if self.pattern:
            try:
                re.compile(self.pattern)
            except re.error as exc:
                raise ValueError(f"placeholder {self.marker}: invalid pattern: {exc}") from exc
        if self.kind is PlaceholderKind.TIME_LAYOUT and not self.layout:
            raise ValueError(f"placeholder {self.marker}: kind time_layout requires layout")
        return self

    def build(self) -> Placeholder:
        if self.kind is PlaceholderKind.REGEXP:
            return regexp(self.marker, cast(str, self.pattern))
        if self.kind is PlaceholderKind.TIME_LAYOUT:
            return time_layout(self.marker, cast(str, self.layout))
        return not_empty(self.marker)


class JsonMatchConfig(BaseSettings):
    """Root configuration model for jsonmatch."""

    placeholders: list[PlaceholderConfig] = Field(default_factory=list)
    log_level: str = Field(default="WARNING")

    model_config = SettingsConfigDict(
        env_prefix="JSONMATCH_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    def build_placeholders(self) -> list[Placeholder]:
        """Placeholders in declaration order."""
        return [item.build() for item in self.placeholders]
