"""jsonmatch compare: check an actual JSON file against an expected one."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import typer
from rich.console import Console

from jsonmatch.comparator import compare, decode
from jsonmatch.config import ConfigLoadError, YAMLConfigLoader, load_config
from jsonmatch.placeholders import Placeholder, not_empty, regexp, time_layout

logger = logging.getLogger(__name__)

console = Console()


def _split_pair(option: str, raw: str) -> tuple[str, str]:
    """Split MARKER=VALUE on the first '='."""
    marker, sep, value = raw.partition("=")
    if not sep or not marker or not value:
        typer.echo(f"Error: {option} expects MARKER=VALUE, got {raw!r}", err=True)
        raise typer.Exit(2)
    return marker, value


def _cli_placeholders(
    not_empty_markers: list[str],
    regexp_pairs: list[str],
    time_layout_pairs: list[str],
) -> list[Placeholder]:
    placeholders = [not_empty(marker) for marker in not_empty_markers]
    for raw in regexp_pairs:
        marker, pattern = _split_pair("--regexp", raw)
        try:
            placeholders.append(regexp(marker, pattern))
        except re.error as exc:
            typer.echo(f"Error: invalid regexp for {marker}: {exc}", err=True)
            raise typer.Exit(2) from exc
    for raw in time_layout_pairs:
        marker, layout = _split_pair("--time-layout", raw)
        placeholders.append(time_layout(marker, layout))
    return placeholders


def _read_payload(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        typer.echo(f"Error: cannot read {path}: {exc}", err=True)
        raise typer.Exit(2) from exc


def compare_command(
    expected: Path,
    actual: Path,
    config: str = "",
    not_empty_markers: list[str] | None = None,
    regexp_pairs: list[str] | None = None,
    time_layout_pairs: list[str] | None = None,
    log_level: str = "",
) -> None:
    """Compare two JSON files; exit 0 on match, 1 on mismatch, 2 on input errors."""
    config_path = YAMLConfigLoader.resolve_path(config or None)
    try:
        settings = load_config(config_path)
        placeholders = settings.build_placeholders()
    except ConfigLoadError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc

    level = logging.getLevelName((log_level or settings.log_level).upper())
    logging.basicConfig(level=level if isinstance(level, int) else logging.WARNING)

    placeholders.extend(
        _cli_placeholders(not_empty_markers or [], regexp_pairs or [], time_layout_pairs or [])
    )
    logger.info("Comparing %s against %s with %d placeholder(s)", actual, expected, len(placeholders))

    expected_payload = _read_payload(expected)
    actual_payload = _read_payload(actual)
    try:
        expected_doc = decode(expected_payload)
        actual_doc = decode(actual_payload)
    except ValueError as exc:
        typer.echo(f"Error: invalid JSON: {exc}", err=True)
        raise typer.Exit(2) from exc

    mismatch = compare(expected_doc, actual_doc, placeholders)

    if mismatch is not None:
        typer.echo(f"FAIL: {actual}", err=True)
        typer.echo(f"  [{mismatch.kind.value}] {mismatch}", err=True)
        raise typer.Exit(1)
    console.print(f"[green]OK[/green]: {actual}", highlight=False)
