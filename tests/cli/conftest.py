"""Shared fixtures for CLI execution tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def cli_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate CLI runs from the caller's TEMPCONV_* variables and any ``.env`` file."""
    monkeypatch.chdir(tmp_path)
    for name in ("TEMPCONV_OUTPUT_FORMAT", "TEMPCONV_VERBOSE", "TEMPCONV_EXIT_WORD"):
        monkeypatch.delenv(name, raising=False)
