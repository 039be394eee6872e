"""CLI application entry point for vartask.

This module is the **sole error boundary** for the entire application.
It catches :class:`~vartask.exceptions.VartaskError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages via Rich
and returning well-defined exit codes.

Architecture notes
------------------
* Option parsing and wiring only — resolution lives in ``core``, file
  access in ``infra``, and the run sequence in :mod:`vartask.cli.lifecycle`.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from vartask.cli import exit_codes
from vartask.cli.console import console
from vartask.cli.lifecycle import Lifecycle
from vartask.cli.messages import ConsoleReporter
from vartask.config import PROG_NAME, Settings, get_settings
from vartask.core.models import DEFAULT_TASK_NAME, Configuration
from vartask.core.protocols import Prompter
from vartask.core.resolver import VariablesResolver
from vartask.exceptions import VartaskError
from vartask.logging_setup import setup_logging
from vartask.version import __version__


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the option parser.

    ``-h`` belongs to the runner (it prints the runner's own syntax), so
    argparse's automatic help is disabled.  ``-i``, ``-e``, ``-o``,
    ``-d`` and ``-k`` are accepted for compatibility but not acted on.
    """
    parser = argparse.ArgumentParser(
        prog=PROG_NAME,
        description="Load global variables files and run a named task.",
        add_help=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument("-h", dest="help", action="store_true")
    parser.add_argument("-q", dest="quiet", action="store_true")
    parser.add_argument("-k", dest="keep", action="store_true")
    parser.add_argument("-v", dest="variables", default=None)
    parser.add_argument("-t", dest="task", default=DEFAULT_TASK_NAME)
    parser.add_argument("-i", dest="template", default=None)
    parser.add_argument("-e", dest="expressions", default=None)
    parser.add_argument("-o", dest="output", default=None)
    parser.add_argument("-d", dest="delimiter", default=None)
    parser.add_argument("command", nargs="?", default=None)
    return parser


def parse_options(argv: list[str] | None = None) -> Configuration:
    """Parse *argv* into a :class:`Configuration`.

    Unrecognised flags are ignored.
    """
    args, _unknown = _build_parser().parse_known_args(argv)
    return Configuration(
        variables=args.variables,
        task=(args.task or DEFAULT_TASK_NAME).lower(),
        quiet=args.quiet,
        help=args.help,
        keep=args.keep,
        template=args.template,
        expressions=args.expressions,
        output=args.output,
        delimiter=args.delimiter,
        command=args.command.lower() if args.command else None,
    )


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(
    argv: list[str] | None = None,
    *,
    settings: Settings | None = None,
    prompter: Prompter | None = None,
) -> int:
    """Run the vartask CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.
    settings:
        Override for the environment-derived settings.
    prompter:
        Override for the interactive prompt.  Tests pass a fake here so
        nothing blocks on stdin.

    Returns
    -------
    int
        OS process exit code.
    """
    config = parse_options(argv)

    from vartask.cli.prompt import QuestionaryPrompter
    from vartask.infra.variables_file import DotenvVariablesSource

    settings = settings if settings is not None else get_settings()
    setup_logging(settings.log_level, log_file=settings.log_file)

    reporter = ConsoleReporter(quiet=config.quiet)
    resolver = VariablesResolver(
        settings.vars_dir,
        settings.default_vars,
        source=DotenvVariablesSource(),
        prompter=prompter if prompter is not None else QuestionaryPrompter(),
        reporter=reporter,
    )
    lifecycle = Lifecycle(config, settings, resolver=resolver, reporter=reporter)
    return lifecycle.run().exit_code


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except VartaskError as exc:
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
