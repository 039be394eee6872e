"""Variables resolver — turns a variables reference into loaded bindings.

A reference is either the path of an existing file or a comma-separated
list of names looked up in the variables directory.  When no reference
is given the operator is offered the default file through the injected
:class:`~vartask.core.protocols.Prompter`.

Guarantees
----------
* :meth:`VariablesResolver.resolve` never raises for a missing or
  unresolved reference.  It warns, forces the task to ``syntax`` and
  returns a failed :class:`~vartask.core.models.Resolution`.
* Files are parsed through the injected
  :class:`~vartask.core.protocols.VariablesSource`, never executed.
"""

from __future__ import annotations

import logging
from pathlib import Path

from vartask.core.dispatcher import TaskName
from vartask.core.models import Configuration, Resolution, VariableSet
from vartask.core.protocols import Prompter, Reporter, VariablesSource
from vartask.exceptions import MissingReferenceError, UnresolvedFileError

logger = logging.getLogger(__name__)

FALLBACK_TASK: TaskName = TaskName.SYNTAX
"""Task forced onto the configuration when resolution fails."""


def split_reference(reference: str) -> list[str]:
    """Split a CSV reference into names, dropping empty items.

    Whitespace separates names as well as commas.
    """
    return [part for part in reference.replace(",", " ").split() if part]


class VariablesResolver:
    """Locate and load the variables files named by a reference.

    Parameters
    ----------
    vars_dir:
        Directory searched for bare names in a CSV reference.
    default_name:
        File name offered at the prompt when no reference was given.
    source:
        Filesystem adapter used to test and parse candidate files.
    prompter:
        Interactive yes/no prompt.
    reporter:
        Sink for operator-facing warnings.
    """

    def __init__(
        self,
        vars_dir: Path,
        default_name: str,
        *,
        source: VariablesSource,
        prompter: Prompter,
        reporter: Reporter,
    ) -> None:
        self._vars_dir = vars_dir
        self._default_name = default_name
        self._source = source
        self._prompter = prompter
        self._reporter = reporter

    @property
    def default_path(self) -> Path:
        """Path of the file suggested when no reference was given."""
        return self._vars_dir / self._default_name

    # ------------------------------------------------------------------
    # Candidate discovery (no loading)
    # ------------------------------------------------------------------

    def candidates(self, reference: str) -> list[Path]:
        """Return the files *reference* resolves to, in load order.

        An existing file path resolves to itself alone.  Otherwise each
        CSV name resolves to the first existing match among
        ``<vars_dir>/<name>`` and ``<name>``; names without a match are
        skipped.
        """
        direct = Path(reference)
        if self._source.is_file(direct):
            return [direct]

        found: list[Path] = []
        for name in split_reference(reference):
            for path in (self._vars_dir / name, Path(name)):
                if self._source.is_file(path):
                    found.append(path)
                    break
            else:
                logger.debug("No variables file found for name %r", name)
        return found

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def resolve(self, config: Configuration, variables: VariableSet) -> Resolution:
        """Load the files named by ``config.variables`` into *variables*.

        On failure ``config.task`` is forced to ``syntax`` and the
        returned :class:`Resolution` carries the error.  *variables* is
        left untouched in that case.
        """
        reference = config.variables
        try:
            if not reference:
                reference = self._prompt_for_reference()
                config.variables = reference
            loaded = self._load(reference, variables)
        except (MissingReferenceError, UnresolvedFileError) as exc:
            config.task = FALLBACK_TASK.value
            return Resolution(reference=reference, failure=exc)

        return Resolution(reference=reference, loaded=tuple(loaded))

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _prompt_for_reference(self) -> str:
        """Offer the default file; return it as the reference when accepted.

        Raises
        ------
        MissingReferenceError
            When the default file does not exist, or the operator declines
            or cancels the prompt.
        """
        self._reporter.warning("missing global variables file")
        candidate = self.default_path

        if not self._source.is_file(candidate):
            self._reporter.warning("exiting. global vars file is required")
            raise MissingReferenceError(
                f"Default variables file not found: {candidate}",
                hint="Pass a variables file with -v <file>.",
            )

        answer = self._prompter.confirm(f"Use the '{candidate}' file?", default=True)
        if not answer:
            self._reporter.warning("a global variables file is required")
            raise MissingReferenceError(
                "No variables file was selected.",
                hint="Pass a variables file with -v <file>.",
            )

        return str(candidate)

    def _load(self, reference: str, variables: VariableSet) -> list[Path]:
        """Load every candidate of *reference*, later files overriding earlier.

        Each file interpolates against the bindings of the files before it.
        Bindings are merged only once every file has parsed.

        Raises
        ------
        UnresolvedFileError
            When no candidate file exists.
        VariablesFileError
            Propagated from the source when a file cannot be read.
        """
        paths = self.candidates(reference)
        if not paths:
            self._reporter.warning(f"missing variables file: '{reference}'")
            raise UnresolvedFileError(
                f"No variables file matches '{reference}'.",
                hint=f"Names are looked up in {self._vars_dir} and then as paths.",
            )

        # Merge only after every file has parsed.
        scope = dict(variables.bindings)
        pending: list[tuple[Path, dict[str, str]]] = []
        for path in paths:
            values = self._source.load(path, scope)
            scope.update(values)
            pending.append((path, values))

        for path, values in pending:
            variables.update(path, values)
            logger.debug("Loaded %d bindings from %s", len(values), path)
        return paths
