"""Domain models for vartask.

:class:`Configuration` and :class:`VariableSet` are the two pieces of
per-invocation state.  They are created once per run, passed explicitly
to every component and reset by the lifecycle cleanup step — there is
no module-level mutable state anywhere in the package.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path

from vartask.exceptions import VartaskError


DEFAULT_TASK_NAME: str = "help"
"""Task dispatched when ``-t`` is not given."""


# ---------------------------------------------------------------------------
# Parsed command-line configuration
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Configuration:
    """Options read from the command line.

    Written by the option parser.  The variables resolver may force
    :attr:`task` to ``"syntax"`` when resolution fails; nothing else
    mutates the record until cleanup calls :meth:`reset`.
    """

    variables: str | None = None
    """Variables reference: a file path or a CSV list of names."""

    task: str = DEFAULT_TASK_NAME
    """Lower-cased name of the task to dispatch."""

    quiet: bool = False
    """Suppress informational and warning messages."""

    help: bool = False
    """``-h`` was given."""

    keep: bool = False
    """``-k`` was given.  Accepted for compatibility, currently unused."""

    template: str | None = None
    expressions: str | None = None
    output: str | None = None
    delimiter: str | None = None

    command: str | None = None
    """First positional argument (``help`` / ``debug``), if any."""

    def reset(self) -> None:
        """Restore every field to its default value."""
        defaults = Configuration()
        for f in fields(self):
            setattr(self, f.name, getattr(defaults, f.name))


# ---------------------------------------------------------------------------
# Loaded variable bindings
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class VariableSet:
    """Key/value bindings merged from every loaded variables file.

    Loading is additive: a later file overrides keys bound by an
    earlier one.
    """

    bindings: dict[str, str] = field(default_factory=dict)
    sources: list[Path] = field(default_factory=list)

    def update(self, source: Path, values: dict[str, str]) -> None:
        """Merge *values* loaded from *source* into the set."""
        self.bindings.update(values)
        self.sources.append(source)

    def clear(self) -> None:
        self.bindings.clear()
        self.sources.clear()

    def __len__(self) -> int:
        return len(self.bindings)

    def __contains__(self, key: object) -> bool:
        return key in self.bindings

    def __getitem__(self, key: str) -> str:
        return self.bindings[key]


# ---------------------------------------------------------------------------
# Resolver result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of resolving a variables reference.

    Exactly one of the two states holds: at least one file was loaded
    and :attr:`failure` is ``None``, or nothing was loaded and
    :attr:`failure` describes why.
    """

    reference: str | None
    loaded: tuple[Path, ...] = ()
    failure: VartaskError | None = None

    @property
    def ok(self) -> bool:
        return self.failure is None and len(self.loaded) > 0
