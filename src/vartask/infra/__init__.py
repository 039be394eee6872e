"""Infrastructure layer — filesystem integration.

Every raw I/O exception must be caught here and re-raised as a
:class:`~vartask.exceptions.VartaskError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from vartask.infra.variables_file import DotenvVariablesSource

__all__: list[str] = ["DotenvVariablesSource"]
