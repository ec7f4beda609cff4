"""Single-select step: one category, default pre-highlighted."""

from typing import Callable

from initializr.errors import SchemaError
from initializr.resolver import ResolvedOptions
from initializr.state import AnswerSet
from initializr.ui import Prompter, report_error


def run_select_step(
    prompter: Prompter,
    state: AnswerSet,
    field: str,
    message: str,
    load_options: Callable[[], ResolvedOptions],
) -> bool:
    """Resolve options, ask, store the chosen id in state.<field>.

    A category that fails to resolve is reported and skipped (field stays
    empty). Returns False only if the user cancelled.
    """
    try:
        options = load_options()
    except SchemaError as e:
        report_error(f"Skipping '{message}' ({e})")
        return True

    index = prompter.select(message, options.display_names, options.initial_index)
    if index is None:
        return False
    setattr(state, field, options.ids[index])
    return True
