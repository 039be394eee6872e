"""Regression tests for the lazily imported UI dependencies (rich/questionary).

``--version`` must keep working when they are missing; every path that
actually renders or prompts must fail with a clean ``EnvironmentError``.
"""

from __future__ import annotations

import sys

import pytest

from vartask.cli.app import main
from vartask.exceptions import EnvironmentError


def _hide_rich(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "rich", None)
    monkeypatch.setitem(sys.modules, "rich.console", None)
    monkeypatch.setitem(sys.modules, "rich.table", None)


def _hide_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setitem(sys.modules, "questionary", None)


def test_version_works_without_rich_or_questionary(monkeypatch: pytest.MonkeyPatch) -> None:
    _hide_rich(monkeypatch)
    _hide_questionary(monkeypatch)

    with pytest.raises(SystemExit) as exc_info:
        main(["--version"])
    assert exc_info.value.code == 0


def test_help_errors_cleanly_when_rich_missing(
    monkeypatch: pytest.MonkeyPatch, settings, fake_prompter,
) -> None:
    _hide_rich(monkeypatch)

    with pytest.raises(EnvironmentError, match="rich is not installed"):
        main(["-h"], settings=settings, prompter=fake_prompter(None))


def test_prompt_errors_cleanly_when_questionary_missing(
    monkeypatch: pytest.MonkeyPatch, settings, vars_dir, write_vars,
) -> None:
    _hide_questionary(monkeypatch)
    write_vars(vars_dir / "default.env", "A=1\n")

    with pytest.raises(EnvironmentError, match="questionary is not installed"):
        main([], settings=settings)
