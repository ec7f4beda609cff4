"""Run the scaffolding tool as a child process."""

import logging
import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from initializr.errors import SpawnError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExecutionResult:
    """Captured output of a finished child process."""

    stdout: bytes
    stderr: bytes
    exit_code: int

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


class BaseExecutor(ABC):
    """Runs an argv to completion. A non-zero exit is a result, not an error."""

    @abstractmethod
    def run(self, argv: Sequence[str]) -> ExecutionResult:
        """Run argv and wait. Raises SpawnError if the process cannot start."""
        ...


class SubprocessExecutor(BaseExecutor):
    """Direct process creation; argv is never handed to a shell."""

    def __init__(self, cwd: Path | str | None = None) -> None:
        self._cwd = cwd

    def run(self, argv: Sequence[str]) -> ExecutionResult:
        if not argv:
            raise SpawnError("Empty command")
        args = list(argv)
        logger.info("Running %s", args[0])
        logger.debug("argv: %r", args)
        try:
            result = subprocess.run(
                args,
                cwd=self._cwd,
                stdin=subprocess.DEVNULL,
                capture_output=True,
                shell=False,
                check=False,
            )
        except FileNotFoundError as e:
            raise SpawnError(f"Command not found: {args[0]}") from e
        except PermissionError as e:
            raise SpawnError(f"Permission denied: {args[0]}") from e
        except (OSError, ValueError) as e:
            # ValueError: embedded NUL byte in an argument
            raise SpawnError(f"Could not start {args[0]}: {e}") from e

        logger.info("%s exited with %d", args[0], result.returncode)
        return ExecutionResult(
            stdout=result.stdout or b"",
            stderr=result.stderr or b"",
            exit_code=result.returncode,
        )
