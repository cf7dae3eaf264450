"""YAML configuration loader utilities."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pydantic import ValidationError

from jsonmatch.config.models import JsonMatchConfig
from jsonmatch.exceptions import ConfigLoadError

logger = logging.getLogger(__name__)


def _deep_merge(base: dict[str, Any], updates: dict[str, Any]) -> dict[str, Any]:
    merged: dict[str, Any] = dict(base)
    for key, value in updates.items():
        if (
            key in merged
            and isinstance(merged[key], dict)
            and isinstance(value, dict)
        ):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class YAMLConfigLoader:
    """Load jsonmatch.yaml with deterministic path resolution."""

    DEFAULT_FILENAME = "jsonmatch.yaml"

    @classmethod
    def resolve_path(cls, cli_path: str | None = None) -> Path:
        """Resolve config path by priority: env -> cli -> cwd default."""
        env_path = os.environ.get("JSONMATCH_CONFIG", "").strip()
        if env_path:
            return Path(env_path)
        if cli_path and cli_path.strip():
            return Path(cli_path.strip())
        return Path.cwd() / cls.DEFAULT_FILENAME

    @classmethod
    def load_dict(cls, path: str | Path | None = None) -> dict[str, Any]:
        """Load YAML into dict. Missing or empty file yields empty dict."""
        target = Path(path) if path is not None else cls.resolve_path()
        logger.debug("Loading jsonmatch config from %s", target)
        if not target.exists():
            return {}
        text = target.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            mark = getattr(exc, "problem_mark", None)
            if mark is not None:
                raise ConfigLoadError(
                    f"Invalid YAML at {target}:{mark.line + 1}:{mark.column + 1}"
                ) from exc
            raise ConfigLoadError(f"Invalid YAML at {target}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigLoadError(f"Config root must be mapping: {target}")
        cls._check_placeholders(target, yaml.compose(text))
        return data

    @staticmethod
    def _check_placeholders(target: Path, root: yaml.Node) -> None:
        """Reject a malformed placeholders section, pointing at its line."""
        section = next(
            (value for key, value in root.value if key.value == "placeholders"),
            None,
        )
        if section is None:
            return
        if not isinstance(section, yaml.SequenceNode):
            raise ConfigLoadError(
                f"placeholders must be a list at {target}:{section.start_mark.line + 1}"
            )
        seen: dict[str, int] = {}
        for entry in section.value:
            line = entry.start_mark.line + 1
            if not isinstance(entry, yaml.MappingNode):
                raise ConfigLoadError(f"placeholder entry must be a mapping at {target}:{line}")
            marker = next(
                (value.value for key, value in entry.value if key.value == "marker"),
                None,
            )
            if not isinstance(marker, str):
                continue
            if marker in seen:
                logger.warning(
                    "Placeholder %s at %s:%d shadowed by line %d", marker, target, line, seen[marker]
                )
            else:
                seen[marker] = line


def load_config(
    config_path: str | Path | None = None,
    overrides: dict[str, Any] | None = None,
) -> JsonMatchConfig:
    """Load configuration from defaults + YAML + environment + runtime overrides."""
    target = config_path if config_path is not None else YAMLConfigLoader.resolve_path()
    data = YAMLConfigLoader.load_dict(target)
    merged = _deep_merge(data, overrides or {})
    try:
        return JsonMatchConfig(**merged)
    except ValidationError as exc:
        raise ConfigLoadError(f"Invalid configuration in {target}: {exc}") from exc
