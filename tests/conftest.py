"""Shared test fixtures for jsonmatch."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

STUBS_DIR = Path(__file__).resolve().parent / "stubs"


@pytest.fixture
def stubs_dir() -> Path:
    return STUBS_DIR


@pytest.fixture
def read_stub() -> Callable[[str], bytes]:
    """Return a reader for JSON documents under tests/stubs."""

    def _read(relative: str) -> bytes:
        return (STUBS_DIR / relative).read_bytes()

    return _read


@pytest.fixture(autouse=True)
def _isolate_config_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's JSONMATCH_* environment out of unit tests."""
    monkeypatch.delenv("JSONMATCH_CONFIG", raising=False)
    monkeypatch.delenv("JSONMATCH_LOG_LEVEL", raising=False)
    monkeypatch.delenv("JSONMATCH_PLACEHOLDERS", raising=False)
