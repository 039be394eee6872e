"""Tests for environment-derived settings (config.py) and logging setup."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from vartask.config import DEFAULT_VARS_NAME, PROG_NAME, get_settings
from vartask.logging_setup import setup_logging

_ENV_KEYS = (
    "VARTASK_BASE_DIR",
    "VARTASK_VARS_DIR",
    "VARTASK_DEFAULT_VARS",
    "VARTASK_LOG_LEVEL",
    "VARTASK_LOG_FILE",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


class TestGetSettings:
    def test_defaults(self, _isolated_cwd: Path) -> None:
        settings = get_settings()
        assert settings.base_dir == _isolated_cwd
        assert settings.vars_dir == _isolated_cwd / "vars"
        assert settings.default_vars == DEFAULT_VARS_NAME
        assert settings.log_level == "WARNING"
        assert settings.log_file is None

    def test_base_dir_moves_vars_dir(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VARTASK_BASE_DIR", str(tmp_path))
        settings = get_settings()
        assert settings.vars_dir == tmp_path / "vars"

    def test_explicit_vars_dir_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VARTASK_BASE_DIR", str(tmp_path))
        monkeypatch.setenv("VARTASK_VARS_DIR", str(tmp_path / "elsewhere"))
        assert get_settings().vars_dir == tmp_path / "elsewhere"

    def test_empty_default_vars_uses_program_name(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VARTASK_DEFAULT_VARS", "")
        assert get_settings().default_vars == PROG_NAME

    def test_log_settings(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VARTASK_LOG_LEVEL", "debug")
        monkeypatch.setenv("VARTASK_LOG_FILE", str(tmp_path / "logs" / "vartask.log"))
        settings = get_settings()
        assert settings.log_level == "DEBUG"
        assert settings.log_file == tmp_path / "logs" / "vartask.log"


class TestSetupLogging:
    def test_console_level(self) -> None:
        setup_logging("info")
        root = logging.getLogger()
        assert len(root.handlers) == 1
        assert root.handlers[0].level == logging.INFO

    def test_unknown_level_falls_back_to_warning(self) -> None:
        setup_logging("chatty")
        assert logging.getLogger().handlers[0].level == logging.WARNING

    def test_log_file_receives_debug(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "vartask.log"
        setup_logging("WARNING", log_file=log_file)

        logging.getLogger("vartask.test").debug("resolver detail")
        for h in logging.getLogger().handlers:
            h.flush()

        assert "resolver detail" in log_file.read_text(encoding="utf-8")
