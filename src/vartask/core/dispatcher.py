"""Task registry and name lookup.

The registry is a closed enumeration.  New tasks are added by extending
:class:`TaskName` and :data:`TASK_DEFINITIONS`; there is no runtime
registration.
"""

from __future__ import annotations

from enum import Enum

from vartask.core.models import DEFAULT_TASK_NAME


class TaskName(str, Enum):
    HELP = "help"
    SYNTAX = "syntax"


TASK_DEFINITIONS: dict[TaskName, str] = {
    TaskName.HELP: "print list of available targets",
    TaskName.SYNTAX: "print command syntax only",
}
"""One-line definition of each task, in display order."""

DEFAULT_TASK: TaskName = TaskName(DEFAULT_TASK_NAME)


def lookup_task(name: str | None) -> TaskName:
    """Map *name* to a registered task.

    Total: unknown and empty names resolve to :data:`DEFAULT_TASK`
    without raising.  Matching is case-insensitive.
    """
    normalized = (name or "").strip().lower()
    try:
        return TaskName(normalized)
    except ValueError:
        return DEFAULT_TASK
