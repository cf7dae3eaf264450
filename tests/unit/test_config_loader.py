"""Unit tests for YAMLConfigLoader and load_config."""

from __future__ import annotations

from pathlib import Path

import pytest

from jsonmatch.config import ConfigLoadError, YAMLConfigLoader, load_config


def test_resolve_path_uses_env_first(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JSONMATCH_CONFIG", "/tmp/from-env.yaml")
    resolved = YAMLConfigLoader.resolve_path("/tmp/from-cli.yaml")
    assert str(resolved).endswith("from-env.yaml")


def test_resolve_path_uses_cli_when_env_missing() -> None:
    resolved = YAMLConfigLoader.resolve_path("/tmp/from-cli.yaml")
    assert str(resolved).endswith("from-cli.yaml")


def test_resolve_path_defaults_to_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    assert YAMLConfigLoader.resolve_path() == tmp_path / "jsonmatch.yaml"


def test_load_dict_missing_file_returns_empty(tmp_path: Path) -> None:
    assert YAMLConfigLoader.load_dict(tmp_path / "missing.yaml") == {}


def test_load_dict_empty_file_returns_empty(tmp_path: Path) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text("", encoding="utf-8")
    assert YAMLConfigLoader.load_dict(target) == {}


def test_load_dict_yaml_error_has_line_column(tmp_path: Path) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text("placeholders: [\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError) as exc_info:
        YAMLConfigLoader.load_dict(target)
    assert "jsonmatch.yaml:" in str(exc_info.value)


def test_load_dict_non_mapping_root_raises(tmp_path: Path) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text("- invalid\n- root\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="root must be mapping"):
        YAMLConfigLoader.load_dict(target)


def test_load_config_builds_placeholders_in_order(tmp_path: Path) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text(
        "placeholders:\n"
        "  - marker: $NOT_EMPTY\n"
        "    kind: not_empty\n"
        "  - marker: $UUID\n"
        "    kind: regexp\n"
        "    pattern: '^[0-9a-f-]{36}$'\n"
        "  - marker: $DATE\n"
        "    kind: time_layout\n"
        "    layout: '%Y-%m-%d'\n",
        encoding="utf-8",
    )
    config = load_config(target)
    placeholders = config.build_placeholders()
    assert [item.marker for item in placeholders] == ["$NOT_EMPTY", "$UUID", "$DATE"]
    assert config.log_level == "WARNING"


def test_load_config_runtime_overrides_win(tmp_path: Path) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text("log_level: INFO\n", encoding="utf-8")
    config = load_config(target, overrides={"log_level": "DEBUG"})
    assert config.log_level == "DEBUG"


def test_load_config_reads_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("JSONMATCH_LOG_LEVEL", "ERROR")
    config = load_config(tmp_path / "missing.yaml")
    assert config.log_level == "ERROR"


def test_load_config_invalid_placeholder_raises(tmp_path: Path) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text("placeholders:\n  - marker: $UUID\n    kind: regexp\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match="requires pattern"):
        load_config(target)


def test_load_dict_placeholders_must_be_list(tmp_path: Path) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text("log_level: INFO\nplaceholders:\n  marker: $UUID\n  kind: not_empty\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError, match=r"placeholders must be a list at .*jsonmatch\.yaml:3"):
        YAMLConfigLoader.load_dict(target)


def test_load_dict_placeholder_entry_must_be_mapping(tmp_path: Path) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text(
        "placeholders:\n  - marker: $NE\n    kind: not_empty\n  - $UUID\n",
        encoding="utf-8",
    )
    with pytest.raises(ConfigLoadError, match=r"entry must be a mapping at .*jsonmatch\.yaml:4"):
        YAMLConfigLoader.load_dict(target)


def test_load_dict_warns_on_shadowed_marker(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    target = tmp_path / "jsonmatch.yaml"
    target.write_text(
        "placeholders:\n"
        "  - marker: $ID\n"
        "    kind: not_empty\n"
        "  - marker: $ID\n"
        "    kind: regexp\n"
        "    pattern: '^\\d+$'\n",
        encoding="utf-8",
    )
    with caplog.at_level("WARNING", logger="jsonmatch.config.loader"):
        data = YAMLConfigLoader.load_dict(target)
    assert len(data["placeholders"]) == 2
    assert "Placeholder $ID" in caplog.text
    assert "shadowed by line 2" in caplog.text
