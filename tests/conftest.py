"""Shared fixtures: a trimmed Initializr metadata document and a scripted Prompter."""

from typing import Any, Sequence

import pytest

from initializr.settings import get_default_settings, reload_settings


def make_metadata() -> dict[str, Any]:
    return {
        "language": {
            "type": "single-select",
            "default": "java",
            "values": [
                {"id": "java", "name": "Java"},
                {"id": "kotlin", "name": "Kotlin"},
                {"id": "groovy", "name": "Groovy"},
            ],
        },
        "bootVersion": {
            "type": "single-select",
            "default": "3.3.4",
            "values": [
                {"id": "3.4.0-SNAPSHOT", "name": "3.4.0 (SNAPSHOT)"},
                {"id": "3.3.4", "name": "3.3.4"},
                {"id": "3.2.10", "name": "3.2.10"},
            ],
        },
        "packaging": {
            "type": "single-select",
            "default": "jar",
            "values": [{"id": "jar", "name": "Jar"}, {"id": "war", "name": "War"}],
        },
        "javaVersion": {
            "type": "single-select",
            "default": "17",
            "values": [
                {"id": "23", "name": "23"},
                {"id": "21", "name": "21"},
                {"id": "17", "name": "17"},
            ],
        },
        "dependencies": {
            "type": "hierarchical-multi-select",
            "values": [
                {
                    "name": "Developer Tools",
                    "values": [
                        {"id": "devtools", "name": "Spring Boot DevTools"},
                        {"id": "lombok", "name": "Lombok", "description": "Java annotation library"},
                    ],
                },
                {
                    "name": "Web",
                    "values": [
                        {"id": "web", "name": "Spring Web"},
                        {"id": "webflux", "name": "Spring Reactive Web"},
                    ],
                },
            ],
        },
        "groupId": {"type": "text", "default": "com.example"},
        "name": {"type": "text", "default": "demo"},
        "description": {"type": "text", "default": "Demo project for Spring Boot"},
        "version": {"type": "text", "default": "0.0.1-SNAPSHOT"},
    }


class ScriptedPrompter:
    """Prompter that replays canned answers and records what it was asked."""

    def __init__(
        self,
        selects: Sequence[int | None] = (),
        texts: Sequence[str | None] = (),
        checkbox: list[int] | None = None,
        confirms: Sequence[bool | None] = (),
    ) -> None:
        self._selects = list(selects)
        self._texts = list(texts)
        self._checkbox = checkbox if checkbox is not None else []
        self._confirms = list(confirms)
        self.calls: list[tuple[str, str, Any]] = []

    def select(self, message: str, choices: Sequence[str], default_index: int = 0) -> int | None:
        self.calls.append(("select", message, (list(choices), default_index)))
        return self._selects.pop(0) if self._selects else default_index

    def checkbox(self, message: str, choices: Sequence[str], groups: Sequence[str] | None = None) -> list[int] | None:
        self.calls.append(("checkbox", message, (list(choices), list(groups or []))))
        return self._checkbox

    def text(self, message: str, default: str = "") -> str | None:
        self.calls.append(("text", message, default))
        return self._texts.pop(0) if self._texts else default

    def confirm(self, message: str, default: bool = True) -> bool | None:
        self.calls.append(("confirm", message, default))
        return self._confirms.pop(0) if self._confirms else False


@pytest.fixture
def metadata() -> dict[str, Any]:
    return make_metadata()


@pytest.fixture
def settings() -> dict[str, Any]:
    return get_default_settings()


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> None:
    """Ensure a clean settings cache for each test."""
    reload_settings()
    yield
    reload_settings()
