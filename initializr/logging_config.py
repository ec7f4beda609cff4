"""Logging setup for the wizard process."""

import logging
import logging.handlers
from pathlib import Path
from typing import Any

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _file_handler(cfg: dict[str, Any], level: int) -> logging.Handler:
    log_path = Path(cfg["file"]).expanduser()
    log_path.parent.mkdir(parents=True, exist_ok=True)
    h = logging.handlers.RotatingFileHandler(
        log_path,
        maxBytes=int(cfg.get("max_bytes", 1024 * 1024)),
        backupCount=int(cfg.get("backup_count", 2)),
        encoding="utf-8",
    )
    h.setLevel(level)
    return h


def _console_handler(level: int) -> logging.Handler:
    h = logging.StreamHandler()  # stderr, so stdout stays the tool's output
    h.setLevel(level)
    return h


def setup_logging(settings: dict[str, Any], *, verbose: bool = False) -> None:
    """Configure the root logger from settings["logging"].

    File logging is enabled only when logging.file is set. Console output
    goes to stderr and is off unless logging.log_to_console or verbose is
    set. With neither handler the root gets a NullHandler so nothing leaks
    into the prompts.
    """
    cfg = settings.get("logging", {})
    level_name = "DEBUG" if verbose else str(cfg.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    root = logging.getLogger()
    root.setLevel(level)
    for h in root.handlers[:]:
        root.removeHandler(h)

    handlers: list[logging.Handler] = []
    if cfg.get("file"):
        handlers.append(_file_handler(cfg, level))
    if verbose or cfg.get("log_to_console", False):
        handlers.append(_console_handler(level))
    if not handlers:
        root.addHandler(logging.NullHandler())
        return

    for h in handlers:
        h.setFormatter(formatter)
        root.addHandler(h)
