"""Protocols (interfaces) consumed by the core layer.

These define the contracts that CLI and infrastructure adapters must
satisfy.  Core code depends ONLY on these protocols — never on concrete
implementations — so tests can swap in fakes for the terminal prompt,
the message sink and the filesystem.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Protocol


class Prompter(Protocol):
    """Contract for the interactive yes/no prompt."""

    def confirm(self, message: str, *, default: bool = True) -> bool | None:
        """Ask the operator *message* and return the answer.

        Returns ``None`` when the prompt was cancelled (Ctrl+C / Esc);
        callers treat that the same as a negative answer.
        """
        ...  # pragma: no cover


class Reporter(Protocol):
    """Contract for operator-facing status messages."""

    def msg(self, text: str) -> None:
        """Emit an informational line."""
        ...  # pragma: no cover

    def warning(self, text: str) -> None:
        """Emit a warning line."""
        ...  # pragma: no cover


class VariablesSource(Protocol):
    """Contract for locating and reading variables files.

    Implementations must map every I/O or decoding failure to
    :class:`~vartask.exceptions.VariablesFileError`.
    """

    def is_file(self, path: Path) -> bool:
        """Return ``True`` when *path* names an existing regular file."""
        ...  # pragma: no cover

    def load(self, path: Path, context: Mapping[str, str]) -> dict[str, str]:
        """Parse *path* and return its bindings.

        ``${VAR}`` references resolve against *context* (bindings loaded
        from earlier files) and keys defined earlier in the same file.

        Raises
        ------
        VariablesFileError
            When the file exists but cannot be read or decoded.
        """
        ...  # pragma: no cover
