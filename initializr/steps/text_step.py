"""Free-text step. No required-field validation: empty input is a valid answer."""

from initializr.state import AnswerSet
from initializr.ui import Prompter


def run_text_step(
    prompter: Prompter,
    state: AnswerSet,
    field: str,
    message: str,
    default: str = "",
) -> bool:
    """Ask for free text and store it in state.<field>. Returns False if cancelled."""
    value = prompter.text(message, default=default)
    if value is None:
        return False
    setattr(state, field, value)
    return True
