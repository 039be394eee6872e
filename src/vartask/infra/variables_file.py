"""Infrastructure: dotenv-style variables files.

Variables files hold ``KEY=VALUE`` lines in dotenv syntax (comments,
quoting, ``export`` prefixes and ``${VAR}`` interpolation).  They are
parsed by python-dotenv and never executed.

Interpolation scope is the bindings loaded from earlier files plus the
keys defined above in the same file.  The process environment is not
consulted; an unknown ``${VAR}`` expands to its ``:-default`` or to an
empty string.

Rules
-----
* Every ``OSError`` / ``UnicodeDecodeError`` is re-raised as
  :class:`~vartask.exceptions.VariablesFileError`.
* No user-facing output.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path

from dotenv import dotenv_values
from dotenv.variables import parse_variables

from vartask.exceptions import VariablesFileError


class DotenvVariablesSource:
    """Concrete :class:`~vartask.core.protocols.VariablesSource` backed by python-dotenv."""

    def __init__(self, *, encoding: str = "utf-8") -> None:
        self._encoding = encoding

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def load(self, path: Path, context: Mapping[str, str] | None = None) -> dict[str, str]:
        """Parse *path* into a ``{key: value}`` mapping.

        Keys declared without a value (a bare ``KEY`` line) are skipped.
        """
        try:
            raw = dotenv_values(path, interpolate=False, encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            raise VariablesFileError(
                f"Cannot read variables file {path}: {exc}",
                hint="Check the file permissions and that it is UTF-8 text.",
            ) from exc

        scope: dict[str, str] = dict(context or {})
        values: dict[str, str] = {}
        for key, value in raw.items():
            if value is None:
                continue
            resolved = "".join(atom.resolve(scope) for atom in parse_variables(value))
            scope[key] = resolved
            values[key] = resolved
        return values
