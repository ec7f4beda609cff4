"""Dependency multi-select step."""

from initializr.errors import SchemaError
from initializr.resolver import resolve_dependencies
from initializr.schema import SchemaDocument
from initializr.state import AnswerSet
from initializr.ui import Prompter, report_error


def _transcribe(positions: list[int], ids: list[str]) -> list[str]:
    """Positions -> ids in menu order, without duplicates or out-of-range picks."""
    out: list[str] = []
    for pos in sorted(set(positions)):
        if 0 <= pos < len(ids) and ids[pos] not in out:
            out.append(ids[pos])
    return out


def run_dependency_step(
    prompter: Prompter,
    state: AnswerSet,
    document: SchemaDocument,
) -> bool:
    """Offer every dependency, nothing pre-checked. Returns False if cancelled."""
    try:
        entries = resolve_dependencies(document)
    except SchemaError as e:
        report_error(f"Skipping dependencies ({e})")
        state.dependencies = []
        return True

    if not entries:
        print("No dependencies offered.")
        state.dependencies = []
        return True

    titles = [
        f"{e.display_name} - {e.description}" if e.description else e.display_name
        for e in entries
    ]
    positions = prompter.checkbox(
        "Select dependencies:",
        titles,
        groups=[e.group for e in entries],
    )
    if positions is None:
        return False
    state.dependencies = _transcribe(positions, [e.id for e in entries])
    return True
