"""Task behaviours — syntax and help output.

:func:`dispatch` routes a task name through
:func:`~vartask.core.dispatcher.lookup_task`, so every unknown name
renders exactly what ``help`` renders.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from vartask.cli.console import output
from vartask.config import PROG_NAME
from vartask.core.dispatcher import TASK_DEFINITIONS, TaskName, lookup_task
from vartask.exceptions import EnvironmentError


def _import_rich_table() -> type[Any]:
    """Import rich table lazily for the task listing."""
    try:
        from rich.table import Table
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Table


def syntax_text(prog: str = PROG_NAME) -> str:
    """Return the usage block shown by ``-h`` and the ``syntax`` task."""
    return (
        "\n"
        f"  usage:  {prog} -v file -t task [-i template -e expressions -o output -d char -k -q]\n"
        f"          {prog} -h\n"
        "\n"
        "  OPTIONS:\n"
        "     -v     Path to global variables, or comma-separated names\n"
        "     -t     Task to perform\n"
        "    [-h]    Help with syntax\n"
        "    [-q]    Quiet messages and warnings\n"
    )


def render_syntax(prog: str = PROG_NAME) -> None:
    output.print(syntax_text(prog), markup=False, highlight=False, soft_wrap=True)


def render_help(prog: str = PROG_NAME) -> None:
    """Print the syntax followed by a table of available tasks."""
    render_syntax(prog)

    table_class = _import_rich_table()
    table = table_class(
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Target", justify="left", min_width=16)
    table.add_column("Definition", justify="left")

    for name, definition in TASK_DEFINITIONS.items():
        table.add_row(name.value, definition)

    output.print(table)
    output.print()


_HANDLERS: dict[TaskName, Callable[[str], None]] = {
    TaskName.HELP: render_help,
    TaskName.SYNTAX: render_syntax,
}


def dispatch(name: str | None, *, prog: str = PROG_NAME) -> TaskName:
    """Run the task registered under *name* and return which one ran."""
    task = lookup_task(name)
    _HANDLERS[task](prog)
    return task
