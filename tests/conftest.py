"""Shared pytest fixtures and configuration for the vartask test suite.

Guidelines
----------
* No test reads from stdin — the prompt is always a fake.
* Variables directories live under ``tmp_path``.
* Tests must not depend on the developer's environment or cwd.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from vartask.config import Settings
from vartask.core.resolver import VariablesResolver
from vartask.infra.variables_file import DotenvVariablesSource


class FakePrompter:
    """Deterministic prompt: returns a fixed answer and records questions."""

    def __init__(self, answer: bool | None) -> None:
        self.answer = answer
        self.questions: list[str] = []

    def confirm(self, message: str, *, default: bool = True) -> bool | None:
        self.questions.append(message)
        return self.answer


class RecordingReporter:
    """Reporter that keeps every message for assertions."""

    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []

    def msg(self, text: str) -> None:
        self.infos.append(text)

    def warning(self, text: str) -> None:
        self.warnings.append(text)


@pytest.fixture(autouse=True)
def _restore_logging():
    """Drop handlers installed by setup_logging() so they never outlive a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for h in list(root.handlers):
        if type(h) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
    logging.captureWarnings(False)


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every test from an empty directory so bare names never hit the repo."""
    workdir = tmp_path / "cwd"
    workdir.mkdir()
    monkeypatch.chdir(workdir)
    return workdir


@pytest.fixture
def vars_dir(tmp_path: Path) -> Path:
    path = tmp_path / "vars"
    path.mkdir()
    return path


@pytest.fixture
def settings(tmp_path: Path, vars_dir: Path) -> Settings:
    return Settings(
        base_dir=tmp_path,
        vars_dir=vars_dir,
        default_vars="default.env",
        log_level="WARNING",
        log_file=None,
    )


@pytest.fixture
def write_vars() -> Callable[[Path, str], Path]:
    """Return a helper that writes a variables file and returns its path."""

    def _write(path: Path, text: str) -> Path:
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


@pytest.fixture
def make_resolver(
    vars_dir: Path,
    reporter: RecordingReporter,
) -> Callable[..., tuple[VariablesResolver, FakePrompter]]:
    """Factory building a resolver over *vars_dir* with a fake prompt."""

    def _make(
        answer: bool | None = None,
        *,
        default_name: str = "default.env",
        source: object | None = None,
    ) -> tuple[VariablesResolver, FakePrompter]:
        prompter = FakePrompter(answer)
        resolver = VariablesResolver(
            vars_dir,
            default_name,
            source=source if source is not None else DotenvVariablesSource(),  # type: ignore[arg-type]
            prompter=prompter,
            reporter=reporter,
        )
        return resolver, prompter

    return _make


@pytest.fixture
def fake_prompter() -> Callable[[bool | None], FakePrompter]:
    return FakePrompter
