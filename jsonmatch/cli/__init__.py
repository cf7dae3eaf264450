"""CLI tools: jsonmatch compare."""

import sys
from importlib import metadata
from pathlib import Path

import typer

from jsonmatch.cli.compare import compare_command

app = typer.Typer(
    name="jsonmatch",
    help="Compare JSON documents with placeholder support.",
)


@app.callback()
def _root() -> None:
    """Compare JSON documents."""


def _print_version_and_exit() -> None:
    """Print installed package version and exit."""
    try:
        version = metadata.version("jsonmatch")
    except metadata.PackageNotFoundError:
        version = "unknown"
    print(f"jsonmatch {version}")
    raise SystemExit(0)


@app.command("compare")
def compare(
    expected: Path = typer.Argument(..., help="Expected JSON document."),  # noqa: B008
    actual: Path = typer.Argument(..., help="Actual JSON document."),  # noqa: B008
    config: str = typer.Option("", "--config", help="Optional jsonmatch.yaml path"),
    not_empty: list[str] = typer.Option(  # noqa: B008
        [],
        "--not-empty",
        help="Marker whose actual value must not be empty (repeatable).",
    ),
    regexp: list[str] = typer.Option(  # noqa: B008
        [],
        "--regexp",
        help="MARKER=PATTERN, actual value must match PATTERN (repeatable).",
    ),
    time_layout: list[str] = typer.Option(  # noqa: B008
        [],
        "--time-layout",
        help="MARKER=LAYOUT, actual value must parse with strptime LAYOUT (repeatable).",
    ),
    log_level: str = typer.Option("", "--log-level", help="Logging level, overrides config log_level"),
) -> None:
    """Compare ACTUAL against EXPECTED and report the first mismatch."""
    compare_command(
        expected=expected,
        actual=actual,
        config=config,
        not_empty_markers=not_empty,
        regexp_pairs=regexp,
        time_layout_pairs=time_layout,
        log_level=log_level,
    )


def main() -> None:
    """CLI entry point."""
    if "--version" in sys.argv or "-V" in sys.argv:
        _print_version_and_exit()
    try:
        app()
    except KeyboardInterrupt:
        sys.exit(130)


if __name__ == "__main__":
    main()
