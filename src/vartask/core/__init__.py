"""Core / service layer — variables resolution and task lookup.

Rules
-----
* No ``print()`` calls.
* No direct file reading — files are reached through
  :class:`~vartask.core.protocols.VariablesSource`.
* No imports from ``cli`` or ``infra``.
"""

from vartask.core.dispatcher import TASK_DEFINITIONS, TaskName, lookup_task
from vartask.core.models import Configuration, Resolution, VariableSet
from vartask.core.protocols import Prompter, Reporter, VariablesSource
from vartask.core.resolver import VariablesResolver

__all__: list[str] = [
    "TASK_DEFINITIONS",
    "Configuration",
    "Prompter",
    "Reporter",
    "Resolution",
    "TaskName",
    "VariableSet",
    "VariablesResolver",
    "VariablesSource",
    "lookup_task",
]
