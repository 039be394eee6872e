"""Lifecycle controller — help / resolve / dispatch / cleanup.

One :class:`Lifecycle` drives one invocation:

1. ``-h`` or a leading ``help`` argument prints the syntax and stops.
2. A leading ``debug`` argument, or ``-t debug``, prints diagnostics
   and stops.
3. Otherwise variables are resolved; the task is dispatched only when
   at least one file was loaded.
4. :meth:`Lifecycle.cleanup` runs exactly once, whichever branch was
   taken and even when an exception escapes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from vartask.cli import exit_codes
from vartask.cli.debug import run_debug
from vartask.cli.messages import ConsoleReporter
from vartask.cli.tasks import dispatch, render_syntax
from vartask.config import PROG_NAME, Settings
from vartask.core.dispatcher import TaskName
from vartask.core.models import Configuration, VariableSet
from vartask.core.resolver import VariablesResolver

logger = logging.getLogger(__name__)

HELP_TOKEN = "help"
DEBUG_TOKEN = "debug"


@dataclass(frozen=True, slots=True)
class RunOutcome:
    """What a single :meth:`Lifecycle.run` did."""

    branch: str
    """One of ``help``, ``debug``, ``dispatched`` or ``unresolved``."""

    exit_code: int
    task: TaskName | None = None
    loaded: tuple[Path, ...] = ()


class Lifecycle:
    """Run one invocation against an already-parsed :class:`Configuration`.

    Parameters
    ----------
    config:
        Parsed options.  Reset by :meth:`cleanup`.
    settings:
        Environment-derived settings, used by the debug branch.
    resolver:
        Variables resolver wired with the prompt and message sink.
    reporter:
        Message sink shared with *resolver*.
    variables:
        Binding store filled during resolution.  A fresh one is created
        when omitted.
    """

    def __init__(
        self,
        config: Configuration,
        settings: Settings,
        *,
        resolver: VariablesResolver,
        reporter: ConsoleReporter,
        variables: VariableSet | None = None,
        prog: str = PROG_NAME,
    ) -> None:
        self.config = config
        self.settings = settings
        self.resolver = resolver
        self.reporter = reporter
        self.variables = variables if variables is not None else VariableSet()
        self._prog = prog

    def run(self) -> RunOutcome:
        try:
            return self._run()
        finally:
            self.cleanup()

    def _run(self) -> RunOutcome:
        config = self.config

        if config.help or config.command == HELP_TOKEN:
            self.reporter.silence()
            render_syntax(self._prog)
            return RunOutcome(branch="help", exit_code=exit_codes.SUCCESS)

        if DEBUG_TOKEN in (config.command, config.task):
            self.reporter.silence()
            code = run_debug(config, self.settings, self.resolver)
            return RunOutcome(branch="debug", exit_code=code)

        requested = config.task
        resolution = self.resolver.resolve(config, self.variables)

        if not resolution.ok:
            logger.debug("Variables resolution failed: %s", resolution.failure)
            self.reporter.warning(f"skipping task '{requested}': no variables file was loaded")
            render_syntax(self._prog)
            return RunOutcome(
                branch="unresolved",
                exit_code=exit_codes.GENERAL_ERROR,
                task=TaskName(config.task),
            )

        task = dispatch(config.task, prog=self._prog)
        return RunOutcome(
            branch="dispatched",
            exit_code=exit_codes.SUCCESS,
            task=task,
            loaded=resolution.loaded,
        )

    def cleanup(self) -> None:
        """Release per-invocation state: loaded bindings and parsed options."""
        reference = self.config.variables or ""
        self.reporter.msg(f"cleaning up global variables {reference}".rstrip())
        self.variables.clear()
        self.config.reset()
