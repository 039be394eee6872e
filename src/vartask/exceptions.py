"""Custom exception hierarchy for vartask.

All exceptions that cross layer boundaries must inherit from
:class:`VartaskError`.  Raw ``OSError`` and decoding errors raised while
reading variables files must NEVER propagate beyond the infrastructure
layer — they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
VartaskError
├── MissingReferenceError
├── UnresolvedFileError
├── VariablesFileError
└── EnvironmentError
"""

from __future__ import annotations


class VartaskError(Exception):
    """Base exception for all vartask errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Variables resolution --------------------------------------------------

class MissingReferenceError(VartaskError):
    """Raised when no variables reference was given and none was accepted."""


class UnresolvedFileError(VartaskError):
    """Raised when a variables reference matches no existing file."""


class VariablesFileError(VartaskError):
    """Raised when an existing variables file cannot be read or decoded."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(VartaskError):
    """Raised when a required runtime dependency is not available."""
