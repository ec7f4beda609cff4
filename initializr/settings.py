"""Load wizard settings from an optional YAML file plus INITIALIZR_* environment overrides."""

import logging
import os
from pathlib import Path
from typing import Any, Mapping

import yaml

from initializr.constants import DEFAULT_ACCEPT, DEFAULT_METADATA_URL

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "INITIALIZR_CONFIG"

_DEFAULTS: dict[str, Any] = {
    "metadata": {
        "url": DEFAULT_METADATA_URL,
        "accept": DEFAULT_ACCEPT,
    },
    "command": {
        "executable": ["spring", "init"],
    },
    "wizard": {
        "loop": False,
        # Not part of the server metadata; the tool derives --type from it
        "build_systems": {
            "type": "single-select",
            "default": "maven",
            "values": [
                {"id": "maven", "name": "Maven"},
                {"id": "gradle", "name": "Gradle"},
            ],
        },
        "text_defaults": {
            "group": "com.example",
            "name": "demo",
            "description": "Demo project for Spring Boot",
            "version": "0.0.1-SNAPSHOT",
        },
    },
    "logging": {
        "file": None,
        "level": "INFO",
        "log_to_console": False,
        "max_bytes": 1048576,  # 1 MB
        "backup_count": 2,
    },
}

# env var -> (dotted path, converter)
_ENV_OVERRIDES: dict[str, tuple[str, Any]] = {
    "INITIALIZR_METADATA_URL": ("metadata.url", str),
    "INITIALIZR_LOOP": ("wizard.loop", lambda v: v.strip().lower() in {"1", "true", "yes", "on"}),
    "INITIALIZR_LOG_LEVEL": ("logging.level", str),
}

_cached: dict[str, Any] | None = None


def _deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """Merge overlay into base recursively. Mutates base."""
    for key, value in overlay.items():
        if value is None:
            continue
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
    return base


def _deep_copy_nested(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _deep_copy_nested(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_deep_copy_nested(x) for x in obj]
    return obj


def get_default_settings() -> dict[str, Any]:
    """Return a deep copy of the built-in defaults."""
    return _deep_copy_nested(_DEFAULTS)


def get_setting(settings: dict[str, Any], path: str, default: Any = None) -> Any:
    """Get a nested value by dot path (e.g. 'metadata.url')."""
    current: Any = settings
    for part in path.split("."):
        if not isinstance(current, dict) or part not in current:
            return default
        current = current[part]
    return current


def set_setting(settings: dict[str, Any], path: str, value: Any) -> None:
    """Set a nested value by dot path, creating intermediate dicts."""
    parts = path.split(".")
    current = settings
    for part in parts[:-1]:
        if not isinstance(current.get(part), dict):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    """$INITIALIZR_CONFIG, else ~/.config/spring-initializr-cli/settings.yaml."""
    env = os.environ if env is None else env
    override = env.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "spring-initializr-cli" / "settings.yaml"


def apply_env_overrides(settings: dict[str, Any], env: Mapping[str, str]) -> dict[str, Any]:
    """Apply INITIALIZR_* variables on top of settings. Mutates settings."""
    for var, (path, convert) in _ENV_OVERRIDES.items():
        raw = env.get(var)
        if raw is None or raw == "":
            continue
        set_setting(settings, path, convert(raw))
    return settings


def reload_settings() -> None:
    """Clear the settings cache."""
    global _cached
    _cached = None


def load_settings(
    config_path: Path | None = None,
    env: Mapping[str, str] | None = None,
) -> dict[str, Any]:
    """Load settings: defaults, then the YAML file, then environment overrides."""
    global _cached
    if _cached is not None:
        return _cached

    path = config_path or default_config_path(env)
    result = get_default_settings()

    if path.exists():
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (yaml.YAMLError, OSError) as e:
            logger.warning("Ignoring unreadable settings file %s: %s", path, e)
            data = None
        if isinstance(data, dict):
            _deep_merge(result, data)
        elif data is not None:
            logger.warning("Ignoring settings file %s: top level is not a mapping", path)

    apply_env_overrides(result, os.environ if env is None else env)

    _cached = result
    return result
