"""Interactive yes/no prompt for the CLI layer."""

from __future__ import annotations

from typing import Any

from vartask.exceptions import EnvironmentError


def _import_questionary() -> Any:
    """Import questionary lazily for interactive confirmation."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise EnvironmentError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


class QuestionaryPrompter:
    """Concrete :class:`~vartask.core.protocols.Prompter` using questionary."""

    def confirm(self, message: str, *, default: bool = True) -> bool | None:
        """Ask a yes/no question.

        Returns ``None`` on Ctrl+C / Esc, which callers treat as "no".
        """
        questionary = _import_questionary()
        answer: bool | None = questionary.confirm(message, default=default).ask()
        return answer
