"""Wizard orchestration: fetch once, ask every step in order, build, execute."""

import logging
import shlex
import sys
from dataclasses import dataclass, field
from typing import Any, Callable, TextIO

import questionary

from initializr.command_builder import DEFAULT_EXECUTABLE, build_command, format_command
from initializr.constants import (
    BANNER_CREDIT,
    BANNER_TITLE,
    BANNER_URL,
    BOOT_VERSION,
    DEFAULT_ACCEPT,
    DEFAULT_METADATA_URL,
    JAVA_VERSION,
    LANGUAGE,
    PACKAGING,
    TEXT_FIELDS,
    WIZARD_CANCELLED,
    WIZARD_FETCH_FAILED,
    WIZARD_SPAWN_FAILED,
    WIZARD_SUCCESS,
)
from initializr.errors import FetchError, SpawnError
from initializr.executor import BaseExecutor, ExecutionResult, SubprocessExecutor
from initializr.metadata_client import MetadataClient
from initializr.resolver import ResolvedOptions, resolve, resolve_category
from initializr.schema import SchemaDocument, parse_category
from initializr.settings import get_setting
from initializr.state import AnswerSet
from initializr.steps import run_dependency_step, run_select_step, run_text_step
from initializr.terminal import reset_terminal
from initializr.ui import Prompter, report_error

logger = logging.getLogger(__name__)


@dataclass
class WizardResult:
    """Outcome of one pass through the wizard."""

    exit_code: int
    cancelled: bool = False
    answers: AnswerSet | None = None
    argv: list[str] = field(default_factory=list)


def print_banner() -> None:
    questionary.print(BANNER_TITLE, style="bold fg:ansibrightgreen")
    questionary.print(BANNER_URL, style="fg:ansibrightyellow")
    questionary.print(BANNER_CREDIT, style="fg:ansibrightcyan")
    print()


def _exit_code(returncode: int) -> int:
    """Shell convention: a child killed by signal N reports 128 + N."""
    return 128 - returncode if returncode < 0 else returncode


def _executable(settings: dict[str, Any]) -> list[str]:
    """command.executable as an argv prefix. Raises SpawnError if it is not usable."""
    value = get_setting(settings, "command.executable", list(DEFAULT_EXECUTABLE))
    if isinstance(value, str):
        value = shlex.split(value)
    if (
        not isinstance(value, list)
        or not value
        or not all(isinstance(part, str) and part for part in value)
    ):
        raise SpawnError(
            f"command.executable must be a command string or a list of strings, got {value!r}"
        )
    return value


def _build_system_options(settings: dict[str, Any]) -> ResolvedOptions:
    raw = get_setting(settings, "wizard.build_systems")
    return resolve_category(parse_category("build_systems", raw))


def _text_default(document: SchemaDocument, settings: dict[str, Any], field_name: str) -> str:
    server = document.text_default(TEXT_FIELDS[field_name])
    if server is not None:
        return server
    return str(get_setting(settings, f"wizard.text_defaults.{field_name}", "") or "")


def collect_answers(
    document: SchemaDocument,
    prompter: Prompter,
    settings: dict[str, Any],
) -> AnswerSet | None:
    """Run every step in order against one document. Returns None if cancelled."""
    state = AnswerSet()

    def select(field_name: str, message: str, load: Callable[[], ResolvedOptions]) -> bool:
        return run_select_step(prompter, state, field_name, message, load)

    def text(field_name: str, message: str) -> bool:
        return run_text_step(
            prompter, state, field_name, message, _text_default(document, settings, field_name)
        )

    steps: list[Callable[[], bool]] = [
        lambda: select("language", "Select the language:", lambda: resolve(document, LANGUAGE)),
        lambda: select(
            "build_system", "Select the build system:", lambda: _build_system_options(settings)
        ),
        lambda: select(
            "boot_version", "Select the Spring Boot version:", lambda: resolve(document, BOOT_VERSION)
        ),
        lambda: text("group", "Group:"),
        lambda: text("name", "Artifact / project name:"),
        lambda: text("description", "Description:"),
        lambda: text("version", "Version:"),
        lambda: select("packaging", "Select the packaging:", lambda: resolve(document, PACKAGING)),
        lambda: select(
            "java_version", "Select the Java version:", lambda: resolve(document, JAVA_VERSION)
        ),
        lambda: run_dependency_step(prompter, state, document),
    ]
    for step in steps:
        if not step():
            return None
    return state


def _relay(stream: TextIO, data: bytes) -> None:
    """Write captured bytes to stream unchanged."""
    if not data:
        return
    stream.flush()
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(data.decode("utf-8", errors="replace"))
    else:
        buffer.write(data)
        buffer.flush()


def report_result(result: ExecutionResult) -> None:
    """Relay the tool's output and print a one-line status."""
    _relay(sys.stdout, result.stdout)
    _relay(sys.stderr, result.stderr)
    if result.ok:
        print("\n✓ Project generated.")
    elif result.exit_code < 0:
        report_error(f"Scaffolding tool terminated by signal {-result.exit_code}")
    else:
        report_error(f"Scaffolding tool failed with exit code {result.exit_code}")


def run_wizard(
    settings: dict[str, Any],
    prompter: Prompter,
    *,
    client: MetadataClient | None = None,
    executor: BaseExecutor | None = None,
    dry_run: bool = False,
) -> WizardResult:
    """One full pass: fetch, prompt, build, execute, report."""
    try:
        executable = _executable(settings)
    except SpawnError as e:
        report_error(str(e))
        return WizardResult(exit_code=WIZARD_SPAWN_FAILED)

    client = client or MetadataClient(
        get_setting(settings, "metadata.url", DEFAULT_METADATA_URL),
        accept=get_setting(settings, "metadata.accept", DEFAULT_ACCEPT),
    )
    try:
        document = client.fetch()
    except FetchError as e:
        report_error(f"Could not load project metadata: {e}")
        return WizardResult(exit_code=WIZARD_FETCH_FAILED)

    logger.info("Metadata loaded from %s", client.url)

    answers = collect_answers(document, prompter, settings)
    reset_terminal()
    if answers is None:
        logger.info("Wizard cancelled by user")
        return WizardResult(exit_code=WIZARD_CANCELLED, cancelled=True)

    argv = build_command(answers, executable)
    print(f"\n$ {format_command(argv)}\n")
    if dry_run:
        return WizardResult(exit_code=WIZARD_SUCCESS, answers=answers, argv=argv)

    executor = executor or SubprocessExecutor()
    try:
        result = executor.run(argv)
    except SpawnError as e:
        report_error(str(e))
        return WizardResult(exit_code=WIZARD_SPAWN_FAILED, answers=answers, argv=argv)

    report_result(result)
    return WizardResult(exit_code=_exit_code(result.exit_code), answers=answers, argv=argv)


def run(
    settings: dict[str, Any],
    prompter: Prompter,
    *,
    loop: bool | None = None,
    dry_run: bool = False,
    client: MetadataClient | None = None,
    executor: BaseExecutor | None = None,
) -> int:
    """Run the wizard once, or repeatedly when looping. Returns the last exit code.

    loop=None takes wizard.loop from settings. Each pass fetches metadata
    afresh; nothing carries over between passes.
    """
    if loop is None:
        loop = bool(get_setting(settings, "wizard.loop", False))

    while True:
        result = run_wizard(settings, prompter, client=client, executor=executor, dry_run=dry_run)
        if result.cancelled or not loop:
            return result.exit_code
        again = prompter.confirm("Create another project?", default=True)
        if not again:
            return result.exit_code
        print()
