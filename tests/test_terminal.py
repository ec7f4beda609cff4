"""Tests for initializr.terminal."""

from unittest.mock import MagicMock, patch

from initializr.terminal import reset_terminal


def test_noop_when_stdin_not_a_tty() -> None:
    with (
        patch("initializr.terminal.sys.stdin", MagicMock(isatty=lambda: False)),
        patch("initializr.terminal.subprocess.run") as mock_run,
    ):
        reset_terminal()
    mock_run.assert_not_called()


def test_runs_stty_sane_on_posix_tty() -> None:
    with (
        patch("initializr.terminal.sys.stdin", MagicMock(isatty=lambda: True)),
        patch("initializr.terminal.sys.platform", "linux"),
        patch("initializr.terminal.subprocess.run") as mock_run,
    ):
        reset_terminal()
    assert mock_run.call_args.args[0] == ["stty", "sane"]


def test_stty_missing_is_ignored() -> None:
    with (
        patch("initializr.terminal.sys.stdin", MagicMock(isatty=lambda: True)),
        patch("initializr.terminal.sys.platform", "linux"),
        patch("initializr.terminal.subprocess.run", side_effect=FileNotFoundError("stty")),
    ):
        reset_terminal()
