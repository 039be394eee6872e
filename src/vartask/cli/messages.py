"""Operator-facing status lines (``✔`` info, ``✘`` warning)."""

from __future__ import annotations

from vartask.cli.console import console


class ConsoleReporter:
    """Concrete :class:`~vartask.core.protocols.Reporter` writing to stderr.

    Nothing is printed while :attr:`quiet` is set.
    """

    def __init__(self, *, quiet: bool = False) -> None:
        self.quiet = quiet

    def silence(self) -> None:
        """Suppress every later message for the rest of the run."""
        self.quiet = True

    def msg(self, text: str) -> None:
        self._emit("✔", text)

    def warning(self, text: str) -> None:
        self._emit("✘", text)

    def _emit(self, mark: str, text: str) -> None:
        if self.quiet:
            return
        console.print(f" {mark} {text}", markup=False, highlight=False, soft_wrap=True)
