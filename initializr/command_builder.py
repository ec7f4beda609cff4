"""Turn a completed AnswerSet into the scaffolding tool's argument vector."""

import shlex
from typing import Sequence

from initializr.state import AnswerSet

DEFAULT_EXECUTABLE: tuple[str, ...] = ("spring", "init")


def _flag(name: str, value: str) -> str:
    # Single "--flag=value" token: the value reaches the tool byte for byte
    return f"--{name}={value}"


def build_command(
    answers: AnswerSet,
    executable: Sequence[str] = DEFAULT_EXECUTABLE,
) -> list[str]:
    """Return the argv for answers. Pure; the result is never passed to a shell.

    --dependencies is always present, empty when nothing was selected. The
    project name doubles as artifactId and as the destination directory.
    """
    build = answers.build_system.lower()
    return [
        *executable,
        _flag("name", answers.name),
        _flag("groupId", answers.group),
        _flag("artifactId", answers.name),
        _flag("version", answers.version),
        _flag("description", answers.description),
        _flag("package-name", f"{answers.group.lower()}.{answers.name}"),
        _flag("dependencies", ",".join(answers.dependencies)),
        _flag("build", build),
        _flag("type", f"{build}-project"),
        _flag("java-version", answers.java_version),
        _flag("language", answers.language.lower()),
        _flag("boot-version", answers.boot_version),
        _flag("packaging", answers.packaging.lower()),
        answers.name,
    ]


def format_command(argv: Sequence[str]) -> str:
    """Shell-quoted rendering of argv, for display only."""
    return shlex.join(argv)
