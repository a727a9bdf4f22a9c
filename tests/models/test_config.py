from __future__ import annotations

from typing import TYPE_CHECKING

from tempconv.models.config import AppSettings

if TYPE_CHECKING:
    from pathlib import Path

    import pytest


class TestAppSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        for name in ("TEMPCONV_OUTPUT_FORMAT", "TEMPCONV_VERBOSE", "TEMPCONV_EXIT_WORD"):
            monkeypatch.delenv(name, raising=False)

        settings = AppSettings()
        assert settings.output_format is None
        assert settings.verbose is False
        assert settings.exit_word == "exit"

    def test_from_environment(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("TEMPCONV_OUTPUT_FORMAT", "json")
        monkeypatch.setenv("TEMPCONV_VERBOSE", "true")
        monkeypatch.setenv("TEMPCONV_EXIT_WORD", "quit")

        settings = AppSettings()
        assert settings.output_format == "json"
        assert settings.verbose is True
        assert settings.exit_word == "quit"

    def test_from_dotenv_file(self, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
        monkeypatch.chdir(tmp_path)
        monkeypatch.delenv("TEMPCONV_EXIT_WORD", raising=False)
        (tmp_path / ".env").write_text("TEMPCONV_EXIT_WORD=bye\nOTHER_VAR=ignored\n")

        assert AppSettings().exit_word == "bye"
