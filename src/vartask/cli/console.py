"""CLI console helpers backed by Rich.

Rich is imported lazily on first use so that ``--version`` keeps
working even when the UI dependency is missing.  Status messages go to
stderr; task output goes to stdout.
"""

from __future__ import annotations

from typing import Any

from vartask.exceptions import EnvironmentError


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console(*, stderr: bool = True) -> Any:
	"""Create a Rich console instance targeting stderr (or stdout)."""
	console_class = _load_rich_console_class()
	return console_class(stderr=stderr)


class _ConsoleProxy:
	"""``print``-compatible proxy that renders through a fresh Rich console.

	A console is created per call so that the current ``sys.stdout`` /
	``sys.stderr`` is always the target.
	"""

	def __init__(self, *, stderr: bool) -> None:
		self._stderr = stderr

	def print(self, *objects: object, **kwargs: Any) -> None:
		get_rich_console(stderr=self._stderr).print(*objects, **kwargs)


console = _ConsoleProxy(stderr=True)
output = _ConsoleProxy(stderr=False)
