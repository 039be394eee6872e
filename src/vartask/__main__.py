"""Allow ``python -m vartask`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m vartask`` behaves identically to the ``vartask``
console script.
"""

from __future__ import annotations

from vartask.cli.app import cli

if __name__ == "__main__":
    cli()
