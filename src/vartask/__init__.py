"""vartask — shell-style task runner driven by global variables files.

Parses a handful of short flags, loads ``KEY=VALUE`` variables files,
dispatches to a named task and resets per-invocation state afterward.
"""

from vartask.version import __version__

__all__: list[str] = ["__version__"]
