"""Prompt capability for the wizard and its questionary implementation."""

import logging
import sys
from typing import Protocol, Sequence

import questionary
from questionary import Choice, Separator, Style

logger = logging.getLogger(__name__)

STYLE = Style(
    [
        ("qmark", "fg:green bold"),
        ("question", "bold"),
        ("answer", "fg:yellow bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("separator", "fg:magenta"),
        ("instruction", "fg:#888888 italic"),
    ]
)


class Prompter(Protocol):
    """Blocking prompts. Every method returns None when the user cancels."""

    def select(self, message: str, choices: Sequence[str], default_index: int = 0) -> int | None:
        """Pick exactly one choice; returns its position."""
        ...

    def checkbox(
        self,
        message: str,
        choices: Sequence[str],
        groups: Sequence[str] | None = None,
    ) -> list[int] | None:
        """Pick any subset, nothing pre-checked; returns positions.

        groups, if given, is parallel to choices and is rendered as headings.
        """
        ...

    def text(self, message: str, default: str = "") -> str | None:
        """Free text; empty input yields the default (or "")."""
        ...

    def confirm(self, message: str, default: bool = True) -> bool | None:
        ...


class QuestionaryPrompter:
    """Prompter backed by questionary. The style is fixed per instance."""

    def __init__(self, style: Style = STYLE) -> None:
        self._style = style

    def select(self, message: str, choices: Sequence[str], default_index: int = 0) -> int | None:
        options = [Choice(title, i) for i, title in enumerate(choices)]
        default = options[default_index] if 0 <= default_index < len(options) else None
        return questionary.select(
            message,
            choices=options,
            default=default,
            style=self._style,
        ).ask()

    def checkbox(
        self,
        message: str,
        choices: Sequence[str],
        groups: Sequence[str] | None = None,
    ) -> list[int] | None:
        options: list[Choice | Separator] = []
        current_group: str | None = None
        for i, title in enumerate(choices):
            group = groups[i] if groups else None
            if group and group != current_group:
                options.append(Separator(f"── {group} ──"))
                current_group = group
            options.append(Choice(title, i, checked=False))
        return questionary.checkbox(message, choices=options, style=self._style).ask()

    def text(self, message: str, default: str = "") -> str | None:
        return questionary.text(message, default=default, style=self._style).ask()

    def confirm(self, message: str, default: bool = True) -> bool | None:
        return questionary.confirm(message, default=default, style=self._style).ask()


def report_error(message: str) -> None:
    """Print a wizard error to stderr and log it."""
    # DEBUG so --verbose console logging does not print it a second time
    logger.debug(message)
    print(f"✗ {message}", file=sys.stderr, flush=True)
