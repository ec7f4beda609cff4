"""Entry point: python -m initializr (or the spring-initializr console script)."""

import argparse
import sys
from pathlib import Path

from dotenv import load_dotenv

from initializr.constants import WIZARD_CANCELLED
from initializr.logging_config import setup_logging
from initializr.settings import load_settings, set_setting
from initializr.terminal import reset_terminal
from initializr.ui import QuestionaryPrompter
from initializr.wizard import print_banner, run


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="spring-initializr",
        description="Interactively assemble and run a 'spring init' command.",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=None,
        metavar="PATH",
        help="Settings YAML file (default: $INITIALIZR_CONFIG or ~/.config/spring-initializr-cli/settings.yaml).",
    )
    parser.add_argument("--url", default=None, help="Metadata endpoint URL.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--loop",
        dest="loop",
        action="store_const",
        const=True,
        default=None,
        help="Offer to start over after each project.",
    )
    mode.add_argument(
        "--once",
        dest="loop",
        action="store_const",
        const=False,
        help="Exit after one project (overrides wizard.loop).",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the command instead of running it.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging to stderr.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the wizard. Returns the process exit code."""
    args = _parse_args(argv)
    load_dotenv(Path.cwd() / ".env")

    settings = load_settings(args.config)
    if args.url:
        set_setting(settings, "metadata.url", args.url)
    setup_logging(settings, verbose=args.verbose)

    try:
        print_banner()
        return run(settings, QuestionaryPrompter(), loop=args.loop, dry_run=args.dry_run)
    except KeyboardInterrupt:
        print("\n\nCancelled.")
        return WIZARD_CANCELLED
    finally:
        reset_terminal()


if __name__ == "__main__":
    sys.exit(main())
