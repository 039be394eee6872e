"""Diagnostic logging for vartask.

Operator-facing status lines go through the CLI reporter; this module
only configures the ``logging`` tree used for debugging the runner.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path


def setup_logging(level: str | int = logging.WARNING, *, log_file: Path | None = None) -> None:
    """Configure the root logger with a stderr handler and an optional file.

    Call this ONCE, very early.  Calling it again replaces the handlers
    installed by the previous call.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(logging.DEBUG if log_file is not None else level)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    logging.captureWarnings(True)
