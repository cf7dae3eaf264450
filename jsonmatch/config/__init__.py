"""Configuration for jsonmatch placeholder sets."""

from jsonmatch.config.loader import YAMLConfigLoader, load_config
from jsonmatch.config.models import JsonMatchConfig, PlaceholderConfig, PlaceholderKind
from jsonmatch.exceptions import ConfigLoadError

__all__ = [
    "ConfigLoadError",
    "JsonMatchConfig",
    "PlaceholderConfig",
    "PlaceholderKind",
    "YAMLConfigLoader",
    "load_config",
]
