"""Tests for interpreter settings loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from patternbook.core.config import (
    LOG_LEVEL_ENV_VAR,
    PROMPT_ENV_VAR,
    InterpreterSettings,
    load_settings,
    normalize_log_level,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv(PROMPT_ENV_VAR, raising=False)


class TestLoadSettings:
    """Settings resolve from file, then environment."""

    def test_defaults_without_file(self, tmp_path: Path) -> None:
        settings = load_settings(tmp_path / "missing.toml")
        assert settings == InterpreterSettings()

    def test_reads_interpreter_table(self, tmp_path: Path) -> None:
        path = tmp_path / "patternbook.toml"
        path.write_text(
            '[interpreter]\nprompt = "calc> "\nshow_tokens = true\nlog_level = "debug"\n'
        )
        settings = load_settings(path)
        assert settings.prompt == "calc> "
        assert settings.show_tokens is True
        assert settings.show_tree is False
        assert settings.log_level == "DEBUG"

    def test_environment_overrides_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        path = tmp_path / "patternbook.toml"
        path.write_text('[interpreter]\nlog_level = "INFO"\nprompt = "a> "\n')
        monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "error")
        monkeypatch.setenv(PROMPT_ENV_VAR, "b> ")
        settings = load_settings(path)
        assert settings.log_level == "ERROR"
        assert settings.prompt == "b> "

    def test_default_file_in_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "patternbook.toml").write_text('[interpreter]\nshow_tree = true\n')
        monkeypatch.chdir(tmp_path)
        assert load_settings().show_tree is True


class TestInvalidConfig:
    """Bad config values fall back to defaults with a warning."""

    def test_malformed_toml(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        path = tmp_path / "patternbook.toml"
        path.write_text("[interpreter\nprompt = ")
        with caplog.at_level(logging.WARNING):
            settings = load_settings(path)
        assert settings == InterpreterSettings()
        assert "Invalid config file" in caplog.text

    def test_non_string_log_level(self, tmp_path: Path) -> None:
        path = tmp_path / "patternbook.toml"
        path.write_text("[interpreter]\nlog_level = 10\n")
        assert load_settings(path).log_level == "WARNING"

    def test_wrong_value_types(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        path = tmp_path / "patternbook.toml"
        path.write_text('[interpreter]\nprompt = 5\nshow_tree = "yes"\nshow_tokens = true\n')
        with caplog.at_level(logging.WARNING):
            settings = load_settings(path)
        assert settings.prompt == "> "
        assert settings.show_tree is False
        assert settings.show_tokens is True
        assert "should be" in caplog.text

    def test_interpreter_not_a_table(self, tmp_path: Path) -> None:
        path = tmp_path / "patternbook.toml"
        path.write_text('interpreter = "fast"\n')
        assert load_settings(path) == InterpreterSettings()


class TestNormalizeLogLevel:
    """Log level names are validated."""

    def test_known_level(self) -> None:
        assert normalize_log_level(" info ") == "INFO"

    def test_unknown_level_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert normalize_log_level("loud", "ERROR") == "ERROR"
        assert "Unknown log level" in caplog.text
