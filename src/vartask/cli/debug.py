"""``vartask debug`` — resolution diagnostics.

Shows where the runner would look for variables files and what the
current reference resolves to, without loading anything.  Renders a
Rich table on stderr, the same way every other status output does.
"""

from __future__ import annotations

import platform
from typing import Any

from vartask.cli import exit_codes
from vartask.cli.console import console
from vartask.config import Settings
from vartask.core.dispatcher import lookup_task
from vartask.core.models import Configuration
from vartask.core.resolver import VariablesResolver
from vartask.exceptions import EnvironmentError
from vartask.version import __version__

_OK = "[green]OK[/green]"
_WARN = "[yellow]WARN[/yellow]"


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for the diagnostic table."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _version_rows() -> list[tuple[str, str, str]]:
    return [
        ("vartask", __version__, _OK),
        ("Python", platform.python_version(), _OK),
    ]


def _directory_rows(settings: Settings) -> list[tuple[str, str, str]]:
    """Return (label, value, status) rows for the configured directories."""
    rows: list[tuple[str, str, str]] = []
    for label, path in (("Base dir", settings.base_dir), ("Vars dir", settings.vars_dir)):
        status = _OK if path.is_dir() else _WARN
        rows.append((label, str(path), status))
    return rows


def _reference_rows(
    config: Configuration,
    resolver: VariablesResolver,
) -> list[tuple[str, str, str]]:
    """Return rows describing the default file and the ``-v`` reference."""
    default = resolver.default_path
    rows = [("Default vars", str(default), _OK if default.is_file() else _WARN)]

    if not config.variables:
        rows.append(("Reference", "(none, would prompt)", _WARN))
        return rows

    rows.append(("Reference", config.variables, _OK))
    candidates = resolver.candidates(config.variables)
    if candidates:
        for path in candidates:
            rows.append(("Resolves to", str(path), _OK))
    else:
        rows.append(("Resolves to", "nothing", _WARN))
    return rows


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_debug(
    config: Configuration,
    settings: Settings,
    resolver: VariablesResolver,
) -> int:
    """Render the diagnostic table.

    Returns
    -------
    int
        Always :data:`exit_codes.SUCCESS`; warnings are informational.
    """
    checks = [
        *_version_rows(),
        *_directory_rows(settings),
        *_reference_rows(config, resolver),
        ("Task", lookup_task(config.task).value, _OK),
    ]

    table_class = _import_rich_table()
    table = table_class(
        title="vartask debug",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)

    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()
    return exit_codes.SUCCESS
